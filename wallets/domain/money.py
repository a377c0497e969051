from decimal import Decimal

from wallets.domain.constants import MINOR_UNITS_PER_MAJOR

TWO_PLACES = Decimal("0.01")


def to_minor_units(amount):
    # int() truncates; exact for values already limited to two decimals.
    return int(amount * MINOR_UNITS_PER_MAJOR)


def from_minor_units(value):
    return (Decimal(value) / MINOR_UNITS_PER_MAJOR).quantize(TWO_PLACES)
