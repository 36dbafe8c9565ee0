from dataclasses import dataclass
from typing import Literal

from balancerv3adapter.enumeration.event_type import EventType


@dataclass(slots=True)
class Block:
    block_number: int
    block_timestamp: int


@dataclass(slots=True)
class Reserves:
    asset0: str
    asset1: str


@dataclass(slots=True)
class SwapEvent:
    block: Block
    txn_id: str
    txn_index: int
    event_index: int
    maker: str
    pair_id: str
    price_native: str
    reserves: Reserves | None
    asset0_in: str | None = None
    asset1_out: str | None = None
    asset0_out: str | None = None
    asset1_in: str | None = None
    event_type: Literal[EventType.SWAP] = EventType.SWAP


@dataclass(slots=True)
class JoinExitEvent:
    block: Block
    event_type: Literal[EventType.JOIN, EventType.EXIT]
    txn_id: str
    txn_index: int
    event_index: int
    maker: str
    pair_id: str
    amount0: str
    amount1: str
    reserves: Reserves | None


NormalizedEvent = SwapEvent | JoinExitEvent
