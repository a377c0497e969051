import uuid
from decimal import Decimal
from unittest.mock import Mock

from django.test import SimpleTestCase, TestCase

from wallets.domain.constants import ErrorCategory
from wallets.domain.exceptions import (
    InsufficientFunds,
    InvalidAmount,
    InvalidCount,
    InvalidSender,
    InvalidWalletId,
    StorageUnavailable,
    UnknownReceiver,
    WalletNotFound,
)
from wallets.domain.services import QueryService, TransferService
from wallets.domain.store import LedgerStore
from wallets.models import Transaction, Wallet


class TransferServiceUnitTests(SimpleTestCase):
    def setUp(self):
        self.store = Mock()
        self.service = TransferService(self.store)
        self.sender = uuid.uuid4()
        self.receiver = uuid.uuid4()

    def test_send_converts_amount_to_minor_units(self):
        self.service.send(str(self.sender), str(self.receiver), "30.05")

        self.store.transfer.assert_called_once_with(self.sender, self.receiver, 3_005)

    def test_invalid_input_never_reaches_store(self):
        for sender, amount, error in (
            ("nope", "1.00", InvalidSender),
            (str(self.sender), "1.0", InvalidAmount),
        ):
            with self.subTest(sender=sender, amount=amount):
                with self.assertRaises(error):
                    self.service.send(sender, str(self.receiver), amount)

        self.store.transfer.assert_not_called()

    def test_store_errors_propagate_with_stable_category(self):
        for error, category in (
            (UnknownReceiver("missing"), ErrorCategory.UNKNOWN_PARTY),
            (InsufficientFunds("short"), ErrorCategory.INSUFFICIENT_FUNDS),
            (StorageUnavailable("down"), ErrorCategory.STORAGE_UNAVAILABLE),
        ):
            with self.subTest(error=error):
                self.store.transfer.side_effect = error
                with self.assertRaises(type(error)) as ctx:
                    self.service.send(str(self.sender), str(self.receiver), "1.00")
                self.assertEqual(ctx.exception.category, category)

    def test_send_does_not_retry_failed_transfer(self):
        self.store.transfer.side_effect = StorageUnavailable("down")

        with self.assertRaises(StorageUnavailable):
            self.service.send(str(self.sender), str(self.receiver), "1.00")

        self.assertEqual(self.store.transfer.call_count, 1)


class QueryServiceUnitTests(SimpleTestCase):
    def setUp(self):
        self.store = Mock()
        self.service = QueryService(self.store)

    def test_list_recent_parses_count(self):
        self.service.list_recent("5")

        self.store.get_last.assert_called_once_with(5)

    def test_list_recent_rejects_bad_count(self):
        with self.assertRaises(InvalidCount):
            self.service.list_recent("five")

        self.store.get_last.assert_not_called()

    def test_get_wallet_balance_parses_id(self):
        wallet_id = uuid.uuid4()

        self.service.get_wallet_balance(str(wallet_id))

        self.store.get_balance.assert_called_once_with(wallet_id)

    def test_get_wallet_balance_rejects_malformed_id(self):
        with self.assertRaises(InvalidWalletId):
            self.service.get_wallet_balance("wallet")

        self.store.get_balance.assert_not_called()


class TransferServiceIntegrationTests(TestCase):
    def setUp(self):
        store = LedgerStore()
        self.transfers = TransferService(store)
        self.queries = QueryService(store)
        self.wallet_a = Wallet.objects.create(balance=10_000)
        self.wallet_b = Wallet.objects.create(balance=10_000)

    def test_send_then_query_balances_and_history(self):
        self.transfers.send(str(self.wallet_a.id), str(self.wallet_b.id), "30.00")

        self.assertEqual(
            self.queries.get_wallet_balance(str(self.wallet_a.id)).balance,
            Decimal("70.00"),
        )
        self.assertEqual(
            self.queries.get_wallet_balance(str(self.wallet_b.id)).balance,
            Decimal("130.00"),
        )
        (latest,) = self.queries.list_recent("1")
        self.assertEqual(
            (latest.sender, latest.receiver, latest.amount),
            (self.wallet_a.id, self.wallet_b.id, Decimal("30.00")),
        )

    def test_send_full_balance_then_one_cent_more_fails(self):
        self.transfers.send(str(self.wallet_a.id), str(self.wallet_b.id), "100.00")

        with self.assertRaises(InsufficientFunds):
            self.transfers.send(str(self.wallet_a.id), str(self.wallet_b.id), "0.01")

        self.wallet_a.refresh_from_db()
        self.assertEqual(self.wallet_a.balance, 0)
        self.assertEqual(Transaction.objects.count(), 1)

    def test_unknown_wallet_balance_is_wallet_not_found(self):
        with self.assertRaises(WalletNotFound):
            self.queries.get_wallet_balance(str(uuid.uuid4()))
