"""
suicore - Core data models for Sui coin handling

Provides the coin, balance and object reference types shared by wallet components.
"""

__version__ = "0.1.0"

from suicore.constants import (
    MAX_U64,
    MIST_PER_SUI,
    SMALL_POOL_THRESHOLD,
    SUI_COIN_TYPE,
)
from suicore.types import (
    Balance,
    Coin,
    CoinPage,
    ObjectRef,
    Page,
    Supply,
)

__all__ = [
    "Balance",
    "Coin",
    "CoinPage",
    "MAX_U64",
    "MIST_PER_SUI",
    "ObjectRef",
    "Page",
    "SMALL_POOL_THRESHOLD",
    "SUI_COIN_TYPE",
    "Supply",
]
