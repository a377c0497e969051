import logging

from wallets.domain.exceptions import DomainError, StorageUnavailable
from wallets.domain.money import to_minor_units
from wallets.domain.policies import parse_count, parse_wallet_id, validate_send_request

logger = logging.getLogger(__name__)


class TransferService:
    def __init__(self, store):
        self.store = store

    def send(self, sender, receiver, amount):
        try:
            request = validate_send_request(sender, receiver, amount)
            tx = self.store.transfer(
                request.sender,
                request.receiver,
                to_minor_units(request.amount),
            )
        except StorageUnavailable:
            raise
        except DomainError as exc:
            logger.info(
                "event=transfer_rejected category=%s reason=%s",
                exc.category.value,
                exc,
            )
            raise

        logger.info(
            "event=transfer_committed tx_id=%s sender=%s receiver=%s amount=%s",
            tx.id,
            tx.sender,
            tx.receiver,
            tx.amount,
        )
        return tx


class QueryService:
    def __init__(self, store):
        self.store = store

    def list_recent(self, count):
        return self.store.get_last(parse_count(count))

    def get_wallet_balance(self, wallet_id):
        return self.store.get_balance(parse_wallet_id(wallet_id))
