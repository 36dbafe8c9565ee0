from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from balancerv3adapter.api.app import create_app
from balancerv3adapter.domain.event import Block, JoinExitEvent, Reserves, SwapEvent
from balancerv3adapter.domain.pair import Pair, PairPool
from balancerv3adapter.domain.token import Erc20Token
from balancerv3adapter.enumeration.event_type import EventType
from balancerv3adapter.exceptions import (
    AddressFormatError,
    FormatError,
    NotFoundError,
    UnsupportedChainError,
    UpstreamError,
)

POOL = '0x93d199263632A4EF4bb438F1feB99e57b4b5f0BD'
ASSET0 = '0x7f39C581F595B53c5cb19bD0b3f8dA6c935E2Ca0'
ASSET1 = '0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2'
PAIR_ID = f'{POOL}-{ASSET0}-{ASSET1}'


@pytest.fixture
def adapter():
    return MagicMock()


@pytest.fixture
def factory(adapter):
    factory = MagicMock()
    factory.envs.SERVICE_NAME = 'balancer-v3-dex-screener-adapter'
    factory.chain_registry.list_supported_slugs.return_value = ['sonic', 'ethereum']
    factory.get_adapter.return_value = adapter
    return factory


@pytest.fixture
def client(factory):
    return TestClient(create_app(factory), raise_server_exceptions=False)


def test_health(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.json() == {'status': 'healthy', 'service': 'balancer-v3-dex-screener-adapter'}


def test_root_describes_endpoints(client):
    response = client.get('/')
    assert response.status_code == 200
    endpoints = response.json()['endpoints']
    assert endpoints['events'] == '/api/{chain}/events?fromBlock={from}&toBlock={to}'


def test_chains(client):
    assert client.get('/api/chains').json() == {'chains': ['sonic', 'ethereum']}


def test_latest_block(client, factory, adapter):
    adapter.get_latest_block.return_value = Block(block_number=123, block_timestamp=1700000000)

    response = client.get('/api/ethereum/latest-block')

    assert response.status_code == 200
    assert response.json() == {'block': {'blockNumber': 123, 'blockTimestamp': 1700000000}}
    factory.get_adapter.assert_called_once_with('ethereum')


def test_unsupported_chain(client, factory):
    factory.get_adapter.side_effect = UnsupportedChainError(
        'Unsupported chain: polygon. Supported chains: sonic, ethereum'
    )

    response = client.get('/api/polygon/latest-block')

    assert response.status_code == 400
    assert response.json()['error'].startswith('Unsupported chain: polygon')


def test_upstream_failure(client, adapter):
    adapter.get_latest_block.side_effect = UpstreamError('subgraph down')

    response = client.get('/api/ethereum/latest-block')

    assert response.status_code == 500
    assert response.json() == {'error': 'subgraph down'}


def test_unexpected_failure(client, adapter):
    adapter.get_latest_block.side_effect = RuntimeError('boom')

    response = client.get('/api/ethereum/latest-block')

    assert response.status_code == 500
    assert response.json() == {'error': 'Internal server error'}


def test_events(client, adapter):
    block = Block(block_number=100, block_timestamp=1700000000)
    adapter.get_events.return_value = [
        SwapEvent(
            block=block,
            txn_id='0xabc',
            txn_index=0,
            event_index=1,
            maker=ASSET0,
            pair_id=PAIR_ID,
            price_native='2',
            reserves=Reserves(asset0='5000', asset1='7000'),
            asset0_in='1',
            asset1_out='2',
        ),
        JoinExitEvent(
            block=block,
            event_type=EventType.EXIT,
            txn_id='0xabc',
            txn_index=1,
            event_index=2,
            maker=ASSET0,
            pair_id=PAIR_ID,
            amount0='10',
            amount1='20',
            reserves=None,
        ),
    ]

    response = client.get('/api/ethereum/events', params={'fromBlock': 100, 'toBlock': 101})

    assert response.status_code == 200
    swap_event, exit_event = response.json()['events']
    assert swap_event == {
        'block': {'blockNumber': 100, 'blockTimestamp': 1700000000},
        'eventType': 'swap',
        'txnId': '0xabc',
        'txnIndex': 0,
        'eventIndex': 1,
        'maker': ASSET0,
        'pairId': PAIR_ID,
        'asset0In': '1',
        'asset1Out': '2',
        'priceNative': '2',
        'reserves': {'asset0': '5000', 'asset1': '7000'},
    }
    assert exit_event['eventType'] == 'exit'
    assert exit_event['amount0'] == '10'
    assert exit_event['reserves'] is None
    adapter.get_events.assert_called_once_with(100, 101)


@pytest.mark.parametrize(
    'params',
    [
        {},
        {'fromBlock': '100'},
        {'toBlock': '100'},
        {'fromBlock': 'abc', 'toBlock': '100'},
        {'fromBlock': '100', 'toBlock': '1.5'},
    ],
)
def test_events_requires_integer_bounds(client, factory, params):
    response = client.get('/api/ethereum/events', params=params)

    assert response.status_code == 400
    assert response.json() == {'error': 'fromBlock and toBlock parameters are required'}
    factory.get_adapter.assert_not_called()


def test_events_rejects_inverted_range(client, factory):
    response = client.get('/api/ethereum/events', params={'fromBlock': 200, 'toBlock': 100})

    assert response.status_code == 400
    assert response.json() == {'error': 'fromBlock must be less than or equal to toBlock'}
    factory.get_adapter.assert_not_called()


def test_pair(client, adapter):
    adapter.get_pair.return_value = Pair(
        id=PAIR_ID,
        dex_key='balancer-v3',
        fee_bps=0.1,
        asset0_id=ASSET0,
        asset1_id=ASSET1,
        creation_block_number=19000000,
        creation_block_timestamp=1705000000,
        creation_txn_id='0xdef',
        creator=None,
        pool=PairPool(
            id=POOL,
            name='Balancer wstETH-WETH',
            asset_ids=[ASSET0, ASSET1],
            pair_ids=[PAIR_ID],
            metadata={'symbol': 'B-wstETH-WETH'},
        ),
    )

    response = client.get('/api/ethereum/pair', params={'id': PAIR_ID})

    assert response.status_code == 200
    assert response.json() == {
        'pair': {
            'id': PAIR_ID,
            'dexKey': 'balancer-v3',
            'feeBps': 0.1,
            'asset0Id': ASSET0,
            'asset1Id': ASSET1,
            'creationBlockNumber': 19000000,
            'creationBlockTimestamp': 1705000000,
            'creationTxnId': '0xdef',
            'creator': None,
            'pool': {
                'id': POOL,
                'name': 'Balancer wstETH-WETH',
                'assetIds': [ASSET0, ASSET1],
                'pairIds': [PAIR_ID],
                'metadata': {'symbol': 'B-wstETH-WETH'},
            },
        }
    }
    adapter.get_pair.assert_called_once_with(PAIR_ID)


@pytest.mark.parametrize(
    'error, status_code',
    [
        (NotFoundError('Pool not found: 0x1'), 404),
        (FormatError('Invalid pair ID format: x'), 400),
        (AddressFormatError('Invalid address: x'), 400),
    ],
)
def test_pair_errors(client, adapter, error, status_code):
    adapter.get_pair.side_effect = error

    response = client.get('/api/ethereum/pair', params={'id': 'x'})

    assert response.status_code == status_code
    assert response.json() == {'error': str(error)}


def test_pair_requires_id(client, adapter):
    response = client.get('/api/ethereum/pair')

    assert response.status_code == 400
    assert response.json() == {'error': 'Pair id parameter is required'}
    adapter.get_pair.assert_not_called()


def test_asset(client, adapter):
    adapter.get_asset.return_value = Erc20Token(
        address=ASSET1, name='Wrapped Ether', symbol='WETH', decimals=18, total_supply='2500.5'
    )

    response = client.get('/api/ethereum/asset', params={'id': ASSET1.lower()})

    assert response.status_code == 200
    assert response.json() == {
        'asset': {'id': ASSET1, 'name': 'Wrapped Ether', 'symbol': 'WETH', 'totalSupply': '2500.5'}
    }


def test_asset_requires_id(client):
    response = client.get('/api/ethereum/asset')

    assert response.status_code == 400
    assert response.json() == {'error': 'Asset id parameter is required'}
