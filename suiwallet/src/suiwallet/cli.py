"""
Command-line interface for Sui coin selection.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger
from pydantic import TypeAdapter, ValidationError
from suicore.types import Balance, Coin, CoinPage

from suiwallet.config import get_settings
from suiwallet.wallet.coin_selection import pick_coins_with_gas, total_balance
from suiwallet.wallet.models import CoinSelectionError, GasCoinSelection, PickMethod

app = typer.Typer(
    name="sui-coins",
    help="Sui coin selection - pick coins and a gas coin for a spend",
    add_completion=False,
)

_coin_list = TypeAdapter(list[Coin])


def setup_logging(level: str) -> None:
    """Configure loguru logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


def load_coins(path: Path) -> list[Coin]:
    """
    Load coins from a JSON file.

    Accepts either a plain list of coin objects or a coin page as returned by
    the ``suix_getCoins`` RPC (``{"data": [...], "nextCursor": ..., "hasNextPage": ...}``).

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If a coin record is malformed
    """
    data = json.loads(path.read_text())
    if isinstance(data, dict):
        page = CoinPage.model_validate(data)
        if page.has_next_page:
            logger.warning(f"Coin page has more results (next cursor {page.next_cursor})")
        return list(page.data)
    return _coin_list.validate_python(data)


def format_selection(selection: GasCoinSelection) -> str:
    lines = [
        "=== Coin Selection ===",
        f"Coins: {len(selection.coins)}",
        f"Total: {selection.total_value}",
    ]
    for coin in selection.coins:
        lines.append(f"  {coin.coin_object_id}  {coin.balance}")
    if selection.gas_coin is not None:
        lines.append(
            f"Gas coin: {selection.gas_coin.coin_object_id}  {selection.gas_coin.balance}"
        )
    else:
        lines.append("Gas coin: none")
    lines.append("======================")
    return "\n".join(lines)


def selection_to_dict(selection: GasCoinSelection) -> dict[str, Any]:
    gas_ref = selection.gas_coin.reference() if selection.gas_coin is not None else None
    return {
        "coins": [
            coin.reference().model_dump(mode="json", by_alias=True) for coin in selection.coins
        ],
        "total": str(selection.total_value),
        "gasCoin": gas_ref.model_dump(mode="json", by_alias=True) if gas_ref else None,
    }


def _load_or_exit(coins_file: Path, coin_type: str) -> list[Coin]:
    try:
        coins = load_coins(coins_file)
    except FileNotFoundError:
        logger.error(f"Coins file not found: {coins_file}")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {coins_file}: {e}")
        raise typer.Exit(1)
    except ValidationError as e:
        logger.error(f"Invalid coin data in {coins_file}: {e}")
        raise typer.Exit(1)

    matching = [coin for coin in coins if coin.coin_type == coin_type]
    logger.info(f"Loaded {len(coins)} coins, {len(matching)} of type {coin_type}")
    return matching


@app.command()
def pick(
    coins_file: Annotated[Path, typer.Argument(help="JSON file with coins or a coin page")],
    amount: Annotated[int, typer.Option("--amount", "-a", help="Amount to spend")] = 0,
    gas: Annotated[int, typer.Option("--gas", "-g", help="Gas budget (0 = no gas coin)")] = 0,
    method: Annotated[
        PickMethod | None,
        typer.Option("--method", "-m", help="Selection order (default from SUI_PICK_METHOD)"),
    ] = None,
    coin_type: Annotated[
        str | None, typer.Option("--coin-type", help="Coin type to select from")
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print object references as JSON")
    ] = False,
    log_level: Annotated[str | None, typer.Option("--log-level", "-l")] = None,
) -> None:
    """Select coins covering AMOUNT and, if --gas is set, a separate gas coin."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    if amount < 0 or gas < 0:
        logger.error("Amount and gas must be non-negative")
        raise typer.Exit(1)

    coins = _load_or_exit(coins_file, coin_type or settings.coin_type)
    pick_method = method or settings.pick_method

    try:
        selection = pick_coins_with_gas(coins, amount, gas, pick_method)
    except CoinSelectionError as e:
        logger.error(f"Coin selection failed ({e.kind.value}): {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(selection_to_dict(selection), indent=2))
    else:
        typer.echo(format_selection(selection))


@app.command()
def balance(
    coins_file: Annotated[Path, typer.Argument(help="JSON file with coins or a coin page")],
    coin_type: Annotated[
        str | None, typer.Option("--coin-type", help="Coin type to aggregate")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print balance as JSON")] = False,
    log_level: Annotated[str | None, typer.Option("--log-level", "-l")] = None,
) -> None:
    """Show the aggregated balance of one coin type."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    selected_type = coin_type or settings.coin_type
    coins = _load_or_exit(coins_file, selected_type)
    summary = Balance.from_coins(selected_type, coins)

    if as_json:
        typer.echo(summary.model_dump_json(by_alias=True, indent=2))
        return

    typer.echo(f"Coin type: {summary.coin_type}")
    typer.echo(f"Coin objects: {summary.coin_object_count}")
    typer.echo(f"Total balance: {total_balance(coins)}")
    for epoch, locked in sorted(summary.locked_balance.items()):
        typer.echo(f"  Locked until epoch {epoch}: {locked}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
