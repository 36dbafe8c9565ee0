from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ChainConfig:
    slug: str
    api_slug: str
    chain_id: int
    name: str
    subgraph_url: str
    rpc_url: str
