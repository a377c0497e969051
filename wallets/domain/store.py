import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from django.core.management import call_command
from django.db import DEFAULT_DB_ALIAS, DatabaseError, transaction
from django.db.models import F

from wallets.domain.constants import MAX_BIGINT, MAX_COUNT
from wallets.domain.exceptions import (
    InsufficientFunds,
    InvalidCount,
    StorageUnavailable,
    UnknownReceiver,
    UnknownSender,
    WalletNotFound,
)
from wallets.domain.money import from_minor_units
from wallets.domain.policies import validate_positive_amount
from wallets.models import Transaction, Wallet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalletBalance:
    id: uuid.UUID
    balance: Decimal


@dataclass(frozen=True)
class TransactionRecord:
    id: int
    sender: uuid.UUID
    receiver: uuid.UUID
    amount: Decimal
    time: datetime

    @classmethod
    def from_model(cls, tx):
        return cls(
            id=tx.id,
            sender=tx.sender_id,
            receiver=tx.receiver_id,
            amount=from_minor_units(tx.amount),
            time=tx.created_at,
        )


class LedgerStore:
    """Wallet balances and the transaction log on one database alias.

    Amounts passed to ``transfer`` are integer minor units. Records handed
    back to callers carry major-unit ``Decimal`` amounts.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def initialize(self):
        # Migrations create the tables and seed wallets exactly once.
        try:
            call_command(
                "migrate",
                database=self.using,
                interactive=False,
                verbosity=0,
            )
            wallet_count = Wallet.objects.using(self.using).count()
        except DatabaseError as exc:
            logger.critical(
                "event=ledger_init_failed database=%s error=%s",
                self.using,
                exc.__class__.__name__,
            )
            raise StorageUnavailable("ledger store could not be initialized") from exc

        logger.info(
            "event=ledger_initialized database=%s wallets=%s",
            self.using,
            wallet_count,
        )

    def transfer(self, sender_id, receiver_id, amount):
        validate_positive_amount(amount)

        try:
            tx = self._transfer(sender_id, receiver_id, amount)
        except DatabaseError as exc:
            logger.exception(
                "event=transfer_storage_error sender=%s receiver=%s amount=%s error=%s",
                sender_id,
                receiver_id,
                amount,
                exc.__class__.__name__,
            )
            raise StorageUnavailable("transfer could not be committed") from exc

        return TransactionRecord.from_model(tx)

    def _transfer(self, sender_id, receiver_id, amount):
        wallets = Wallet.objects.using(self.using)

        with transaction.atomic(using=self.using):
            # Lock in primary key order so overlapping transfers cannot deadlock.
            locked = {
                wallet.pk: wallet
                for wallet in wallets.select_for_update()
                .filter(pk__in={sender_id, receiver_id})
                .order_by("pk")
            }

            sender = locked.get(sender_id)
            if sender is None:
                raise UnknownSender(f"sender wallet={sender_id} does not exist")
            if receiver_id not in locked:
                raise UnknownReceiver(f"receiver wallet={receiver_id} does not exist")

            if amount > MAX_BIGINT:
                raise InsufficientFunds(f"wallet={sender_id} has insufficient funds")

            # The balance guard in the UPDATE is the overdraft check.
            debited = wallets.filter(pk=sender_id, balance__gte=amount).update(
                balance=F("balance") - amount
            )
            if debited == 0:
                raise InsufficientFunds(f"wallet={sender_id} has insufficient funds")

            wallets.filter(pk=receiver_id).update(balance=F("balance") + amount)

            return Transaction.objects.using(self.using).create(
                sender_id=sender_id,
                receiver_id=receiver_id,
                amount=amount,
            )

    def get_balance(self, wallet_id):
        try:
            balance = (
                Wallet.objects.using(self.using)
                .filter(pk=wallet_id)
                .values_list("balance", flat=True)
                .first()
            )
        except DatabaseError as exc:
            logger.exception(
                "event=balance_storage_error wallet=%s error=%s",
                wallet_id,
                exc.__class__.__name__,
            )
            raise StorageUnavailable("balance could not be read") from exc

        if balance is None:
            raise WalletNotFound(f"wallet={wallet_id} does not exist")

        return WalletBalance(id=wallet_id, balance=from_minor_units(balance))

    def get_last(self, n):
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidCount("count must be a non-negative integer")
        if n > MAX_COUNT:
            raise InvalidCount("count is too large")
        if n == 0:
            return []

        try:
            rows = list(
                Transaction.objects.using(self.using).order_by("-created_at", "-id")[
                    :n
                ]
            )
        except DatabaseError as exc:
            logger.exception(
                "event=history_storage_error count=%s error=%s",
                n,
                exc.__class__.__name__,
            )
            raise StorageUnavailable("transactions could not be read") from exc

        return [TransactionRecord.from_model(tx) for tx in rows]
