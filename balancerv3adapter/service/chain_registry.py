import logging

from balancerv3adapter.config.envs import EnvsConfig
from balancerv3adapter.domain.chain import ChainConfig
from balancerv3adapter.exceptions import UnsupportedChainError
from balancerv3adapter.misc.info import get_chains_config

logger = logging.getLogger(__name__)


class ChainRegistry:
    """
    Chains known to the adapter, joined with the endpoints configured in the environment.

    A chain is supported only when both ``SUBGRAPH_URL_<CHAIN>`` and ``RPC_URL_<CHAIN>``
    are set.
    """

    def __init__(self, envs: EnvsConfig, chains: tuple[dict, ...] | None = None):
        self.envs = envs
        self._configs: dict[str, ChainConfig] = {}
        self._api_slugs: dict[str, str] = {}
        for chain in chains if chains is not None else get_chains_config():
            slug = chain['slug'].lower()
            self._api_slugs[chain['api_slug'].upper()] = slug
            env_suffix = slug.upper()
            subgraph_url = getattr(envs, f'SUBGRAPH_URL_{env_suffix}', '')
            rpc_url = getattr(envs, f'RPC_URL_{env_suffix}', '')
            if not subgraph_url or not rpc_url:
                logger.debug(f'Chain {slug} is not configured, skipping')
                continue
            self._configs[slug] = ChainConfig(
                slug=slug,
                api_slug=chain['api_slug'],
                chain_id=int(chain['chain_id']),
                name=chain['name'],
                subgraph_url=subgraph_url,
                rpc_url=rpc_url,
            )

    def get_config(self, slug: str) -> ChainConfig:
        if not self.is_supported(slug):
            raise UnsupportedChainError(
                f'Unsupported chain: {slug}. '
                f'Supported chains: {", ".join(self.list_supported_slugs())}'
            )
        return self._configs[slug.lower()]

    def list_supported_slugs(self) -> list[str]:
        return list(self._configs)

    def is_supported(self, slug: str) -> bool:
        return isinstance(slug, str) and slug.lower() in self._configs

    def slug_for_api_slug(self, api_slug: str) -> str:
        return self._api_slugs.get(api_slug.upper(), api_slug.lower())
