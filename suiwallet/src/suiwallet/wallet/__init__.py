"""
Coin selection over Sui coin objects.
"""

from suiwallet.wallet.coin_selection import (
    order_coins,
    pick_coin_no_less,
    pick_coins,
    pick_coins_with_gas,
    total_balance,
)
from suiwallet.wallet.models import (
    CoinSelectionError,
    CoinSelectionErrorKind,
    CoinsNotMatchRequestError,
    GasCoinSelection,
    InsufficientBalanceError,
    NeedMoreObjectsError,
    PickMethod,
)

__all__ = [
    "CoinSelectionError",
    "CoinSelectionErrorKind",
    "CoinsNotMatchRequestError",
    "GasCoinSelection",
    "InsufficientBalanceError",
    "NeedMoreObjectsError",
    "PickMethod",
    "order_coins",
    "pick_coin_no_less",
    "pick_coins",
    "pick_coins_with_gas",
    "total_balance",
]
