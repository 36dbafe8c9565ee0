from unittest.mock import MagicMock

import pytest

from balancerv3adapter.config.envs import EnvsConfig
from balancerv3adapter.domain.add_remove import AddRemove
from balancerv3adapter.domain.chain import ChainConfig
from balancerv3adapter.domain.pool import Pool, PoolToken
from balancerv3adapter.domain.swap import Swap
from balancerv3adapter.enumeration.event_type import AddRemoveType
from balancerv3adapter.service.chain_registry import ChainRegistry

POOL_ADDRESS = '0x93d199263632a4ef4bb438f1feb99e57b4b5f0bd'
TOKEN_A = '0x7f39c581f595b53c5cb19bd0b3f8da6c935e2ca0'
TOKEN_B = '0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2'
TOKEN_C = '0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48'
USER = '0xba12222222228d8ba445958a75a0704d566bf2c8'
TXN_1 = '0x223d9918964385d52a49e2550a80824d3e294206f83e90e00e82c2853df4d7fe'
TXN_2 = '0x5b2f5e8d8b1c4b4a0f6e0b2c2a7c9f1d3e4a5b6c7d8e9f0a1b2c3d4e5f6a7b8c'


@pytest.fixture
def envs():
    return EnvsConfig(
        _env_file=None,
        SUBGRAPH_URL_ETHEREUM='https://subgraph.test/ethereum',
        RPC_URL_ETHEREUM='https://rpc.test/ethereum',
        SUBGRAPH_URL_SONIC='https://subgraph.test/sonic',
        RPC_URL_SONIC='https://rpc.test/sonic',
        SUBGRAPH_URL_BASE='https://subgraph.test/base',
        RPC_URL_BASE='',
        SUBGRAPH_URL_ARBITRUM='',
        RPC_URL_ARBITRUM='',
        SUBGRAPH_URL_OPTIMISM='',
        RPC_URL_OPTIMISM='',
        SUBGRAPH_URL_AVALANCHE='',
        RPC_URL_AVALANCHE='',
        SUBGRAPH_URL_GNOSIS='',
        RPC_URL_GNOSIS='',
        SUBGRAPH_URL_HYPEREVM='',
        RPC_URL_HYPEREVM='',
    )


@pytest.fixture
def chain_registry(envs):
    return ChainRegistry(envs)


@pytest.fixture
def ethereum_config():
    return ChainConfig(
        slug='ethereum',
        api_slug='MAINNET',
        chain_id=1,
        name='Ethereum',
        subgraph_url='https://subgraph.test/ethereum',
        rpc_url='https://rpc.test/ethereum',
    )


@pytest.fixture
def pool():
    return Pool(
        id=POOL_ADDRESS,
        address=POOL_ADDRESS,
        name='Balancer wstETH-WETH',
        symbol='B-wstETH-WETH',
        swap_fee='0.001',
        tokens=[
            PoolToken(address=TOKEN_A, symbol='wstETH', balance='5000', index=0),
            PoolToken(address=TOKEN_B, symbol='WETH', balance='7000', index=1),
        ],
        block_number=19000000,
        block_timestamp=1705000000,
        transaction_hash=TXN_2,
        pool_creator=USER,
    )


@pytest.fixture
def swap():
    return Swap(
        id='swap-1',
        pool=POOL_ADDRESS,
        token_in=TOKEN_A,
        token_out=TOKEN_B,
        token_amount_in='1000000000000000000',
        token_amount_out='2000000000000000000',
        user=USER,
        block_number=100,
        block_timestamp=1700000000,
        transaction_hash=TXN_1,
        log_index=0,
    )


@pytest.fixture
def add_remove(pool):
    return AddRemove(
        id='add-1',
        type=AddRemoveType.ADD,
        sender=USER,
        amounts=['1000', '2000'],
        pool=pool,
        user=USER,
        block_number=100,
        block_timestamp=1700000000,
        transaction_hash=TXN_1,
        log_index=3,
    )


@pytest.fixture
def raw_pool():
    return {
        'id': POOL_ADDRESS,
        'address': POOL_ADDRESS,
        'name': 'Balancer wstETH-WETH',
        'symbol': 'B-wstETH-WETH',
        'swapFee': '0.001',
        'blockNumber': '19000000',
        'blockTimestamp': '1705000000',
        'transactionHash': TXN_2,
        'poolCreator': USER,
        'tokens': [
            {
                'name': 'Wrapped liquid staked Ether 2.0',
                'symbol': 'wstETH',
                'decimals': 18,
                'address': TOKEN_A,
                'balance': '5000',
                'index': 0,
            },
            {
                'name': 'Wrapped Ether',
                'symbol': 'WETH',
                'decimals': 18,
                'address': TOKEN_B,
                'balance': '7000',
                'index': 1,
            },
        ],
    }


@pytest.fixture
def raw_swap():
    return {
        'id': 'swap-1',
        'pool': POOL_ADDRESS,
        'tokenIn': TOKEN_A,
        'tokenOut': TOKEN_B,
        'tokenAmountIn': '1000000000000000000',
        'tokenAmountOut': '2000000000000000000',
        'user': {'id': USER},
        'blockNumber': '100',
        'blockTimestamp': '1700000000',
        'transactionHash': TXN_1,
        'logIndex': '0',
    }


@pytest.fixture
def raw_add_remove(raw_pool):
    return {
        'id': 'add-1',
        'type': 'ADD',
        'sender': USER,
        'amounts': ['1000', '2000'],
        'pool': raw_pool,
        'user': {'id': USER},
        'blockNumber': '100',
        'blockTimestamp': '1700000000',
        'transactionHash': TXN_1,
        'logIndex': '3',
    }


@pytest.fixture
def token_mapping_service():
    """Mapping service that resolves nothing."""
    service = MagicMock()
    service.resolve_in_swaps.side_effect = lambda swaps, chain_slug: list(swaps)
    service.resolve_in_add_removes.side_effect = lambda items, chain_slug: list(items)
    service.resolve_in_pool.side_effect = lambda pool, chain_slug: pool
    return service
