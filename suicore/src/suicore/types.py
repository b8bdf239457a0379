"""
Sui object data models using Pydantic for validation and serialization.

The JSON-RPC API encodes u64/u128 quantities as decimal strings and uses
camelCase keys. The models below accept both and serialize back the same way.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from suicore.constants import MAX_U64

# Non-negative arbitrary precision integer, emitted as a string in JSON mode
BigInt = Annotated[int, Field(ge=0), PlainSerializer(str, return_type=str, when_used="json")]

ObjectId = Annotated[str, Field(pattern=r"^0x[0-9a-fA-F]{1,64}$")]

# Base58 encoded digest
TransactionDigest = Annotated[str, Field(min_length=1, pattern=r"^[1-9A-HJ-NP-Za-km-z]+$")]

T = TypeVar("T")
C = TypeVar("C")


class ObjectRef(BaseModel):
    """Reference to a specific version of an object, as used in transaction inputs."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    object_id: ObjectId
    version: int = Field(..., ge=0, le=MAX_U64)
    digest: TransactionDigest


class Coin(BaseModel):
    """
    A coin object owned by an address.

    Only ``balance`` matters to coin selection; the remaining fields travel
    with the coin so the caller can build object references from the result.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    coin_type: str = Field(..., min_length=1)
    coin_object_id: ObjectId
    version: BigInt
    digest: TransactionDigest
    balance: BigInt
    locked_until_epoch: BigInt | None = None
    previous_transaction: TransactionDigest

    def reference(self) -> ObjectRef:
        """Object reference with the version truncated to u64."""
        return ObjectRef(
            object_id=self.coin_object_id,
            version=self.version & MAX_U64,
            digest=self.digest,
        )

    @property
    def is_locked(self) -> bool:
        return self.locked_until_epoch is not None


class Balance(BaseModel):
    """Aggregated balance of one coin type."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    coin_type: str
    coin_object_count: int = Field(default=0, ge=0, le=MAX_U64)
    total_balance: BigInt = 0
    locked_balance: dict[int, BigInt] = Field(default_factory=dict)

    @classmethod
    def from_coins(cls, coin_type: str, coins: Iterable[Coin]) -> Balance:
        """
        Aggregate the coins of ``coin_type``.

        Locked coins count towards the total and are also reported per
        unlock epoch in ``locked_balance``.
        """
        count = 0
        total = 0
        locked: dict[int, int] = {}
        for coin in coins:
            if coin.coin_type != coin_type:
                continue
            count += 1
            total += coin.balance
            if coin.locked_until_epoch is not None:
                epoch = coin.locked_until_epoch
                locked[epoch] = locked.get(epoch, 0) + coin.balance

        return cls(
            coin_type=coin_type,
            coin_object_count=count,
            total_balance=total,
            locked_balance=locked,
        )


class Supply(BaseModel):
    value: BigInt


class Page(BaseModel, Generic[T, C]):
    """One page of a cursor-paginated listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    data: list[T] = Field(default_factory=list)
    next_cursor: C | None = None
    has_next_page: bool = False


CoinPage = Page[Coin, str]
