from dataclasses import dataclass, field


@dataclass(slots=True)
class PoolToken:
    address: str
    name: str = ''
    symbol: str = ''
    decimals: int = 18
    # Raw point-in-time balance, kept as the subgraph's decimal string.
    balance: str = '0'
    index: int | None = None


@dataclass(slots=True)
class Pool:
    id: str
    address: str
    name: str = ''
    symbol: str = ''
    swap_fee: str = ''
    tokens: list[PoolToken] = field(default_factory=list)
    block_number: int | None = None
    block_timestamp: int | None = None
    transaction_hash: str | None = None
    pool_creator: str | None = None
