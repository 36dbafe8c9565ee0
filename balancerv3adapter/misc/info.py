import json
from functools import cache
from pathlib import Path

DEX_KEY = 'balancer-v3'
SERVICE_TITLE = 'Balancer V3 DEX Screener Adapter'
SERVICE_VERSION = '1.0.0'

INITIAL_PAGINATION_CURSOR = '0x'

UNKNOWN_TOKEN_NAME = 'Unknown Token'
UNKNOWN_TOKEN_SYMBOL = 'UNKNOWN'
DEFAULT_TOKEN_DECIMALS = 18


@cache
def get_chains_config() -> tuple[dict, ...]:
    with open(Path(__file__).parent.parent / 'chains_config.json') as file:
        data = json.load(file)
    return tuple(data)
