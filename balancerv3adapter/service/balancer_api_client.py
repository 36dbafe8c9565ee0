import logging

from balancerv3adapter.domain.token import RegistryToken
from balancerv3adapter.graphql.client import GraphQLClient
from balancerv3adapter.graphql.queries import TOKENS_QUERY
from balancerv3adapter.mappers.subgraph_mapper import SubgraphMapper

logger = logging.getLogger(__name__)


class BalancerApiClient:
    """Client of the Balancer token registry (``tokenGetTokens``)."""

    def __init__(self, graphql_client: GraphQLClient):
        self.graphql_client = graphql_client

    def get_tokens(self, api_slug: str) -> list[RegistryToken]:
        data = self.graphql_client.execute(TOKENS_QUERY, {'chains': [api_slug.upper()]})
        tokens = data.get('tokenGetTokens') or []
        logger.debug(f'Fetched {len(tokens)} registry tokens for {api_slug}')
        return [SubgraphMapper.registry_token_from_dict(token) for token in tokens]
