"""
Pytest configuration and fixtures for suicore tests.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from suicore.constants import SUI_COIN_TYPE
from suicore.types import Coin

DIGEST = "4Tnh7AUxJ3QJ9m7tQYTZkQ8cWB2vKgx5b3k3VTfcYHHZ"
PREVIOUS_TX = "9xHfGkX2mB4rD8nqS3pVwY6cZtJ5eKuA7LzRbN1hWsTg"


@pytest.fixture
def coin_json() -> dict[str, object]:
    """A coin as returned by the suix_getCoins RPC."""
    return {
        "coinType": SUI_COIN_TYPE,
        "coinObjectId": "0x" + "ab" * 32,
        "version": "4253",
        "digest": DIGEST,
        "balance": "1000000000",
        "previousTransaction": PREVIOUS_TX,
    }


@pytest.fixture
def make_coin() -> Callable[..., Coin]:
    """Factory building coins with a unique object id per index."""

    def _make(
        balance: int,
        index: int = 1,
        coin_type: str = SUI_COIN_TYPE,
        locked_until_epoch: int | None = None,
    ) -> Coin:
        return Coin(
            coin_type=coin_type,
            coin_object_id=f"0x{index:064x}",
            version=index,
            digest=DIGEST,
            balance=balance,
            locked_until_epoch=locked_until_epoch,
            previous_transaction=PREVIOUS_TX,
        )

    return _make
