from wallets.domain.constants import ErrorCategory


class DomainError(Exception):
    """Base class for domain-layer errors."""

    category = None


class InvalidInput(DomainError):
    """Raised when request input is malformed; detected before any store access."""

    category = ErrorCategory.INVALID_INPUT


class InvalidSender(InvalidInput):
    """Raised when sender is not a well-formed wallet id."""


class InvalidReceiver(InvalidInput):
    """Raised when receiver is not a well-formed wallet id."""


class InvalidAmount(InvalidInput):
    """Raised when amount is not a positive two-decimal value."""


class InvalidWalletId(InvalidInput):
    """Raised when a queried wallet id is malformed."""


class InvalidCount(InvalidInput):
    """Raised when count is not a non-negative integer."""


class UnknownParty(DomainError):
    """Raised when a referenced wallet does not exist."""

    category = ErrorCategory.UNKNOWN_PARTY


class UnknownSender(UnknownParty):
    pass


class UnknownReceiver(UnknownParty):
    pass


class WalletNotFound(UnknownParty):
    """Raised when target wallet does not exist."""


class InsufficientFunds(DomainError):
    """Raised when a transfer would overdraw the sender."""

    category = ErrorCategory.INSUFFICIENT_FUNDS


class StorageUnavailable(DomainError):
    """Raised when the ledger database fails; details stay server-side."""

    category = ErrorCategory.STORAGE_UNAVAILABLE
