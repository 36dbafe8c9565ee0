import logging
import threading

from balancerv3adapter.config.envs import EnvsConfig
from balancerv3adapter.domain.chain import ChainConfig
from balancerv3adapter.graphql.client import GraphQLClient
from balancerv3adapter.graphql.subgraph_client import BalancerV3SubgraphClient
from balancerv3adapter.service.balancer_api_client import BalancerApiClient
from balancerv3adapter.service.chain_registry import ChainRegistry
from balancerv3adapter.service.dex.balancer_v3.balancer_v3 import BalancerV3Adapter
from balancerv3adapter.service.erc20_service import Erc20Service
from balancerv3adapter.service.token_mapping_service import TokenMappingService
from balancerv3adapter.web3_utils import web3_from_url

logger = logging.getLogger(__name__)


class AdapterFactory:
    """Wires the chain registry, the shared token mapping cache and one adapter per chain."""

    def __init__(self, envs: EnvsConfig, chain_registry: ChainRegistry | None = None):
        self.envs = envs
        self.chain_registry = chain_registry or ChainRegistry(envs)
        self.token_mapping_service = TokenMappingService(
            chain_registry=self.chain_registry,
            balancer_api_client=BalancerApiClient(self._graphql_client(envs.BALANCER_API_URL)),
            erc20_service_factory=self.erc20_service_for,
            cache_seconds=envs.TOKEN_MAPPING_CACHE_SECONDS,
        )
        self._adapters: dict[str, BalancerV3Adapter] = {}
        self._lock = threading.Lock()

    def _graphql_client(self, url: str) -> GraphQLClient:
        return GraphQLClient(url, timeout=self.envs.HTTP_TIMEOUT, retries=self.envs.HTTP_RETRIES)

    def erc20_service_for(self, chain_config: ChainConfig) -> Erc20Service:
        return Erc20Service(web3_from_url(chain_config.rpc_url, self.envs.HTTP_TIMEOUT))

    def get_adapter(self, chain_slug: str) -> BalancerV3Adapter:
        chain_config = self.chain_registry.get_config(chain_slug)
        with self._lock:
            adapter = self._adapters.get(chain_config.slug)
            if adapter is None:
                logger.info(f'Creating adapter for chain {chain_config.slug}')
                subgraph_client = BalancerV3SubgraphClient(
                    self._graphql_client(chain_config.subgraph_url),
                    chain_slug=chain_config.slug,
                    token_mapping_service=self.token_mapping_service,
                    page_size=self.envs.SUBGRAPH_PAGE_SIZE,
                )
                adapter = BalancerV3Adapter(
                    chain_config, subgraph_client, self.erc20_service_for(chain_config)
                )
                self._adapters[chain_config.slug] = adapter
        return adapter
