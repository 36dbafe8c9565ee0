import logging

from balancerv3adapter.domain.add_remove import AddRemove
from balancerv3adapter.domain.event import Block
from balancerv3adapter.domain.pool import Pool
from balancerv3adapter.domain.swap import Swap
from balancerv3adapter.exceptions import UpstreamError
from balancerv3adapter.graphql.client import GraphQLClient
from balancerv3adapter.graphql.queries import (
    ADD_REMOVES_QUERY,
    LATEST_BLOCK_QUERY,
    POOL_QUERY,
    POOL_QUERY_AT_BLOCK,
    SWAPS_QUERY,
)
from balancerv3adapter.mappers.subgraph_mapper import SubgraphMapper
from balancerv3adapter.misc.info import INITIAL_PAGINATION_CURSOR
from balancerv3adapter.service.token_mapping_service import TokenMappingService

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 1000


class BalancerV3SubgraphClient:
    def __init__(
        self,
        graphql_client: GraphQLClient,
        chain_slug: str,
        token_mapping_service: TokenMappingService,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.graphql_client = graphql_client
        self.chain_slug = chain_slug
        self.token_mapping_service = token_mapping_service
        self.page_size = page_size

    def _fetch_all(self, query: str, entity: str, from_block: int, to_block: int) -> list[dict]:
        """
        Pages through ``entity`` ordered by id, each page starting after the last id seen.
        Stops on the first page shorter than the page size.
        """
        items = []
        cursor = INITIAL_PAGINATION_CURSOR
        while True:
            data = self.graphql_client.execute(
                query,
                {
                    'first': self.page_size,
                    'id_gt': cursor,
                    'fromBlock': str(from_block),
                    'toBlock': str(to_block),
                },
            )
            page = data.get(entity)
            if page is None:
                raise UpstreamError(f'Subgraph response has no {entity}')
            items.extend(page)
            if len(page) < self.page_size:
                break
            cursor = page[-1]['id']
        logger.debug(f'Fetched {len(items)} {entity} for blocks {from_block}-{to_block}')
        return items

    def get_all_swaps(self, from_block: int, to_block: int) -> list[Swap]:
        raw_swaps = self._fetch_all(SWAPS_QUERY, 'swaps', from_block, to_block)
        swaps = [SubgraphMapper.swap_from_dict(item) for item in raw_swaps]
        return self.token_mapping_service.resolve_in_swaps(swaps, self.chain_slug)

    def get_all_add_removes(self, from_block: int, to_block: int) -> list[AddRemove]:
        raw_add_removes = self._fetch_all(ADD_REMOVES_QUERY, 'addRemoves', from_block, to_block)
        add_removes = [SubgraphMapper.add_remove_from_dict(item) for item in raw_add_removes]
        return self.token_mapping_service.resolve_in_add_removes(add_removes, self.chain_slug)

    def get_pool(self, pool_address: str, block_number: int | None = None) -> Pool | None:
        variables = {'poolId': pool_address.lower()}
        query = POOL_QUERY
        if block_number is not None:
            variables['blockNumber'] = block_number
            query = POOL_QUERY_AT_BLOCK

        data = self.graphql_client.execute(query, variables)
        if not data.get('pool'):
            return None
        pool = SubgraphMapper.pool_from_dict(data['pool'])
        return self.token_mapping_service.resolve_in_pool(pool, self.chain_slug)

    def get_latest_block(self) -> Block:
        data = self.graphql_client.execute(LATEST_BLOCK_QUERY)
        meta = data.get('_meta')
        if not meta:
            raise UpstreamError('Subgraph response has no _meta block')
        return SubgraphMapper.block_from_meta(meta)
