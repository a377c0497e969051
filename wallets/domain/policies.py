import re
import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from wallets.domain.constants import MAX_COUNT
from wallets.domain.exceptions import (
    InvalidAmount,
    InvalidCount,
    InvalidReceiver,
    InvalidSender,
    InvalidWalletId,
)

_AMOUNT_PATTERN = re.compile(r"[0-9]+\.[0-9]{2}")
_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class SendRequest:
    sender: uuid.UUID
    receiver: uuid.UUID
    amount: Decimal


def _parse_uuid(value):
    if not isinstance(value, str):
        return None
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


def parse_wallet_id(value, *, error=InvalidWalletId, message="invalid wallet id"):
    wallet_id = _parse_uuid(value)
    if wallet_id is None:
        raise error(message)
    return wallet_id


def parse_amount(value):
    """Parse a major-unit amount written as ``D.DD``.

    The value must be positive and written exactly the way ``"{:.2f}"`` would
    print it, so ``"1"``, ``"1.5"``, ``"1.000"``, ``"+1.00"`` and ``"1e2"``
    are all rejected.
    """
    if not isinstance(value, str):
        raise InvalidAmount("amount must be a string with two decimal places")

    if not _AMOUNT_PATTERN.fullmatch(value):
        raise InvalidAmount("amount must have exactly two decimal places")

    try:
        amount = Decimal(value)
    except InvalidOperation as exc:
        raise InvalidAmount("amount is not a number") from exc

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmount("amount must be greater than zero")

    if f"{amount:.2f}" != value:
        raise InvalidAmount("amount must have exactly two decimal places")

    return amount


def validate_send_request(sender, receiver, amount):
    return SendRequest(
        sender=parse_wallet_id(
            sender, error=InvalidSender, message="invalid sender wallet"
        ),
        receiver=parse_wallet_id(
            receiver, error=InvalidReceiver, message="invalid receiver wallet"
        ),
        amount=parse_amount(amount),
    )


def parse_count(value):
    if isinstance(value, bool):
        raise InvalidCount("count must be a non-negative integer")
    if isinstance(value, int):
        count = value
    elif isinstance(value, str) and _COUNT_PATTERN.fullmatch(value):
        count = int(value)
    else:
        raise InvalidCount("count must be a non-negative integer")

    if count < 0:
        raise InvalidCount("count must be a non-negative integer")
    if count > MAX_COUNT:
        raise InvalidCount("count is too large")
    return count


def validate_positive_amount(amount):
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount("amount must be a positive integer in minor units")

    if amount <= 0:
        raise InvalidAmount("amount must be greater than zero")

    return amount
