from enum import Enum

MINOR_UNITS_PER_MAJOR = 100

SEED_WALLET_COUNT = 10
SEED_WALLET_BALANCE = 100 * MINOR_UNITS_PER_MAJOR

# Largest value a BIGINT column or a LIMIT clause accepts.
MAX_BIGINT = 2**63 - 1
MAX_COUNT = MAX_BIGINT


class ErrorCategory(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN_PARTY = "UNKNOWN_PARTY"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
