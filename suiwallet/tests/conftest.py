"""
Pytest configuration and fixtures for suiwallet tests.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from suicore.constants import SUI_COIN_TYPE
from suicore.types import Coin

DIGEST = "4Tnh7AUxJ3QJ9m7tQYTZkQ8cWB2vKgx5b3k3VTfcYHHZ"
PREVIOUS_TX = "9xHfGkX2mB4rD8nqS3pVwY6cZtJ5eKuA7LzRbN1hWsTg"


@pytest.fixture
def make_coins() -> Callable[[list[int]], list[Coin]]:
    """Build one coin per balance; object ids encode the input position (0x1, 0x2, ...)."""

    def _make(balances: list[int]) -> list[Coin]:
        return [
            Coin(
                coin_type=SUI_COIN_TYPE,
                coin_object_id=f"0x{i:x}",
                version=i,
                digest=DIGEST,
                balance=balance,
                previous_transaction=PREVIOUS_TX,
            )
            for i, balance in enumerate(balances, start=1)
        ]

    return _make
