from fastapi import APIRouter, Query, Request

from balancerv3adapter.exceptions import FormatError
from balancerv3adapter.mappers.event_mapper import EventMapper
from balancerv3adapter.mappers.pair_mapper import AssetMapper, PairMapper
from balancerv3adapter.misc.info import SERVICE_TITLE
from balancerv3adapter.service.adapter_factory import AdapterFactory
from balancerv3adapter.utils import validate_range

router = APIRouter()


def _factory(request: Request) -> AdapterFactory:
    return request.app.state.adapter_factory


def _parse_block(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


@router.get('/health')
def health(request: Request):
    return {'status': 'healthy', 'service': request.app.state.service_name}


@router.get('/chains')
def chains(request: Request):
    return {'chains': _factory(request).chain_registry.list_supported_slugs()}


@router.get('/{chain}/latest-block')
def latest_block(chain: str, request: Request):
    block = _factory(request).get_adapter(chain).get_latest_block()
    return {'block': EventMapper.dict_from_block(block)}


@router.get('/{chain}/asset')
def asset(chain: str, request: Request, asset_id: str | None = Query(None, alias='id')):
    if not asset_id:
        raise FormatError('Asset id parameter is required')
    token = _factory(request).get_adapter(chain).get_asset(asset_id)
    return {'asset': AssetMapper.dict_from_erc20_token(token)}


@router.get('/{chain}/pair')
def pair(chain: str, request: Request, pair_id: str | None = Query(None, alias='id')):
    if not pair_id:
        raise FormatError('Pair id parameter is required')
    result = _factory(request).get_adapter(chain).get_pair(pair_id)
    return {'pair': PairMapper.dict_from_pair(result)}


@router.get('/{chain}/events')
def events(
    chain: str,
    request: Request,
    from_block: str | None = Query(None, alias='fromBlock'),
    to_block: str | None = Query(None, alias='toBlock'),
):
    start = _parse_block(from_block)
    end = _parse_block(to_block)
    if start is None or end is None:
        raise FormatError('fromBlock and toBlock parameters are required')
    validate_range(start, end)

    adapter = _factory(request).get_adapter(chain)
    normalized_events = adapter.get_events(start, end)
    return {'events': [EventMapper.dict_from_event(event) for event in normalized_events]}


ENDPOINTS = {
    'health': '/api/health',
    'chains': '/api/chains',
    'latestBlock': '/api/{chain}/latest-block',
    'asset': '/api/{chain}/asset?id={address}',
    'pair': '/api/{chain}/pair?id={pairId}',
    'events': '/api/{chain}/events?fromBlock={from}&toBlock={to}',
}


def describe_service() -> dict:
    return {'name': SERVICE_TITLE, 'endpoints': ENDPOINTS}
