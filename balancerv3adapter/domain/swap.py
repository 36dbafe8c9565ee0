from dataclasses import dataclass


@dataclass(slots=True)
class Swap:
    id: str
    pool: str
    token_in: str
    token_out: str
    token_amount_in: str
    token_amount_out: str
    user: str
    block_number: int
    block_timestamp: int
    transaction_hash: str
    log_index: int
    token_in_symbol: str = ''
    token_out_symbol: str = ''
