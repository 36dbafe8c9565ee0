from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class ParsedPairId:
    pool_address: str
    asset0: str
    asset1: str


@dataclass(slots=True)
class PairPool:
    id: str
    name: str
    asset_ids: list[str]
    pair_ids: list[str]
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class Pair:
    id: str
    dex_key: str | None
    fee_bps: float | None
    asset0_id: str
    asset1_id: str
    creation_block_number: int | None = None
    creation_block_timestamp: int | None = None
    creation_txn_id: str | None = None
    creator: str | None = None
    pool: PairPool | None = None
