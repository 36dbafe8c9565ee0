from dataclasses import dataclass

from balancerv3adapter.domain.pool import Pool
from balancerv3adapter.enumeration.event_type import AddRemoveType


@dataclass(slots=True)
class AddRemove:
    id: str
    type: AddRemoveType
    sender: str
    # Positionally aligned with pool.tokens
    amounts: list[str]
    pool: Pool
    user: str
    block_number: int
    block_timestamp: int
    transaction_hash: str
    log_index: int
