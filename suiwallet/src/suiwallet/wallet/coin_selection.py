"""
Coin selection algorithms for wallet spending.

Provides greedy coin selection over Sui coin objects, optionally reserving a
separate gas coin that is never part of the spend selection.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger
from suicore.constants import SMALL_POOL_THRESHOLD
from suicore.types import Coin

from suiwallet.wallet.models import (
    CoinsNotMatchRequestError,
    GasCoinSelection,
    InsufficientBalanceError,
    NeedMoreObjectsError,
    PickMethod,
)


def total_balance(coins: Sequence[Coin]) -> int:
    """Sum of all coin balances."""
    return sum(coin.balance for coin in coins)


def order_coins(coins: Sequence[Coin], method: PickMethod) -> Sequence[Coin]:
    """
    Return coins in the order they are accumulated for ``method``.

    Sorting is stable, so coins with equal balances keep their input order
    for both ascending and descending policies.
    """
    if method == PickMethod.INPUT_ORDER:
        return coins
    if method == PickMethod.SMALLEST_FIRST:
        return sorted(coins, key=lambda c: c.balance)
    if method == PickMethod.LARGEST_FIRST:
        return sorted(coins, key=lambda c: c.balance, reverse=True)
    raise ValueError(f"Unknown pick method: {method}")


def pick_coins(coins: Sequence[Coin], amount: int, method: PickMethod) -> list[Coin]:
    """
    Select coins whose balances sum to at least ``amount``.

    Walks the coins in ``method`` order and stops at the first coin that brings
    the running total to the target. No attempt is made to minimize the number
    of coins or the change.

    Note that a zero amount still selects the first ordered coin when any
    coin is available.

    Args:
        coins: Candidate coins (not modified)
        amount: Target amount
        method: Accumulation order

    Returns:
        Selected coins in accumulation order

    Raises:
        NeedMoreObjectsError: If all coins together are below ``amount``
    """
    if amount < 0:
        raise ValueError(f"Amount must be non-negative, got {amount}")

    selected: list[Coin] = []
    total = 0

    for coin in order_coins(coins, method):
        selected.append(coin)
        total += coin.balance
        if total >= amount:
            logger.debug(
                f"Selected {len(selected)}/{len(coins)} coins ({method.value}): "
                f"total {total} for amount {amount}"
            )
            return selected

    # Only reachable without coins: an empty selection covers a zero amount
    if total >= amount:
        return selected

    raise NeedMoreObjectsError(required=amount, available=total)


def pick_coins_with_gas(
    coins: Sequence[Coin],
    amount: int,
    gas_amount: int,
    method: PickMethod,
) -> GasCoinSelection:
    """
    Select coins for ``amount`` plus one separate gas coin covering ``gas_amount``.

    The gas coin is the smallest coin with a balance of at least ``gas_amount``
    (the first one wins among equals), whatever ``method`` is. It is excluded
    from the pool before the spend coins are picked, so the two never overlap.

    Args:
        coins: Candidate coins (not modified)
        amount: Target spend amount
        gas_amount: Gas budget, 0 when no gas coin is needed
        method: Accumulation order for the spend coins

    Returns:
        GasCoinSelection with ``gas_coin`` set to None when ``gas_amount`` is 0

    Raises:
        NeedMoreObjectsError: If there are no coins, or the coins left after
            reserving gas do not reach ``amount``
        CoinsNotMatchRequestError: If no single coin covers ``gas_amount``
    """
    if gas_amount < 0:
        raise ValueError(f"Gas amount must be non-negative, got {gas_amount}")

    if amount == 0 and gas_amount == 0:
        return GasCoinSelection(coins=[], gas_coin=None)

    if gas_amount == 0:
        return GasCoinSelection(coins=pick_coins(coins, amount, method), gas_coin=None)

    if not coins:
        raise NeedMoreObjectsError(required=amount + gas_amount, available=0)

    gas_index: int | None = None
    for i, coin in enumerate(coins):
        if coin.balance < gas_amount:
            continue
        if gas_index is None or coin.balance < coins[gas_index].balance:
            gas_index = i

    if gas_index is None:
        raise CoinsNotMatchRequestError(
            required=gas_amount,
            message=f"No coin has a balance of at least {gas_amount} to pay gas",
        )

    gas_coin = coins[gas_index]
    remaining = [coin for i, coin in enumerate(coins) if i != gas_index]

    spend = pick_coins(remaining, amount, method)
    logger.debug(f"Reserved gas coin {gas_coin.coin_object_id} ({gas_coin.balance})")
    return GasCoinSelection(coins=spend, gas_coin=gas_coin)


def pick_coin_no_less(coins: list[Coin], amount: int) -> Coin:
    """
    Remove and return the first coin (in list order) with balance >= ``amount``.

    Unlike the gas coin search this does not look for the tightest fit: the
    first qualifying position wins. The list is only modified on success.

    Raises:
        InsufficientBalanceError: If nothing matched and at most
            SMALL_POOL_THRESHOLD coins are in the list
        CoinsNotMatchRequestError: If nothing matched in a larger list
    """
    for i, coin in enumerate(coins):
        if coin.balance >= amount:
            return coins.pop(i)

    if len(coins) <= SMALL_POOL_THRESHOLD:
        raise InsufficientBalanceError(required=amount, remaining=len(coins))
    raise CoinsNotMatchRequestError(
        required=amount, message="No coin is enough to cover the gas"
    )
