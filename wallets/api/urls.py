from django.conf import settings
from django.urls import path

from wallets.api.views import SendAPIView, TransactionsAPIView, WalletBalanceAPIView
from wallets.domain.services import QueryService, TransferService
from wallets.domain.store import LedgerStore

ledger_store = LedgerStore(using=settings.LEDGER_DATABASE_ALIAS)
transfer_service = TransferService(ledger_store)
query_service = QueryService(ledger_store)

urlpatterns = [
    path(
        "send",
        SendAPIView.as_view(transfer_service=transfer_service),
        name="send",
    ),
    path(
        "transactions",
        TransactionsAPIView.as_view(query_service=query_service),
        name="transactions",
    ),
    path(
        "wallet/<str:wallet_id>/balance",
        WalletBalanceAPIView.as_view(query_service=query_service),
        name="wallet-balance",
    ),
]
