"""
Wallet data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from suicore.types import Coin


class PickMethod(str, Enum):
    """Order in which coins are accumulated towards a target amount."""

    SMALLEST_FIRST = "smallest_first"
    LARGEST_FIRST = "largest_first"
    INPUT_ORDER = "input_order"


class CoinSelectionErrorKind(str, Enum):
    NEED_MORE_OBJECTS = "need_more_objects"
    COINS_NOT_MATCH_REQUEST = "coins_not_match_request"
    INSUFFICIENT_BALANCE = "insufficient_balance"


class CoinSelectionError(ValueError):
    """Base class for coin selection failures."""

    kind: CoinSelectionErrorKind


class NeedMoreObjectsError(CoinSelectionError):
    """All available coins together do not reach the requested amount."""

    kind = CoinSelectionErrorKind.NEED_MORE_OBJECTS

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Need more coin objects: requested {required}, available {available}"
        )

    @property
    def shortfall(self) -> int:
        return max(0, self.required - self.available)


class CoinsNotMatchRequestError(CoinSelectionError):
    """No single coin is large enough for the requested amount."""

    kind = CoinSelectionErrorKind.COINS_NOT_MATCH_REQUEST

    def __init__(self, required: int, message: str | None = None) -> None:
        self.required = required
        super().__init__(message or f"No coin has a balance of at least {required}")


class InsufficientBalanceError(CoinSelectionError):
    """No coin matched and too few coins are left to look further."""

    kind = CoinSelectionErrorKind.INSUFFICIENT_BALANCE

    def __init__(self, required: int, remaining: int) -> None:
        self.required = required
        self.remaining = remaining
        super().__init__(
            f"Insufficient balance: no coin of at least {required} "
            f"among {remaining} remaining coins"
        )


@dataclass
class GasCoinSelection:
    """Result of gas-aware coin selection"""

    coins: list[Coin] = field(default_factory=list)
    gas_coin: Coin | None = None

    @property
    def total_value(self) -> int:
        return sum(coin.balance for coin in self.coins)
