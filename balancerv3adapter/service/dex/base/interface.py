from abc import ABC, abstractmethod

from balancerv3adapter.domain.event import Block, NormalizedEvent
from balancerv3adapter.domain.pair import Pair
from balancerv3adapter.domain.token import Erc20Token


class DexAdapterInterface(ABC):
    @abstractmethod
    def get_latest_block(self) -> Block: ...

    @abstractmethod
    def get_events(self, from_block: int, to_block: int) -> list[NormalizedEvent]: ...

    @abstractmethod
    def get_pair(self, pair_id: str) -> Pair: ...

    @abstractmethod
    def get_asset(self, asset_id: str) -> Erc20Token: ...
