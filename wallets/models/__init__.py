from wallets.models.transaction import Transaction
from wallets.models.wallet import Wallet

__all__ = ["Wallet", "Transaction"]
