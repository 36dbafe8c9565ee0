import dataclasses
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from balancerv3adapter.domain.add_remove import AddRemove
from balancerv3adapter.domain.chain import ChainConfig
from balancerv3adapter.domain.pool import Pool, PoolToken
from balancerv3adapter.domain.swap import Swap
from balancerv3adapter.domain.token import TokenInfo
from balancerv3adapter.misc.info import DEFAULT_TOKEN_DECIMALS
from balancerv3adapter.service.balancer_api_client import BalancerApiClient
from balancerv3adapter.service.chain_registry import ChainRegistry
from balancerv3adapter.service.erc20_service import Erc20Service
from balancerv3adapter.utils import timestamp_now

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SECONDS = 5 * 60

TokenMapping = dict[str, TokenInfo]


@dataclass(slots=True, frozen=True)
class CachedMapping:
    value: TokenMapping = field(default_factory=dict)
    fetched_at: int = 0


def is_fresh(record: CachedMapping | None, now: int, max_age: int) -> bool:
    """An empty mapping is never fresh, so it is refetched on the next lookup."""
    if record is None or not record.value:
        return False
    return now - record.fetched_at < max_age


class TokenMappingService:
    """
    Maps ERC4626 wrapper tokens of a chain to their underlying token.

    The mapping of a chain is refreshed as a whole and swapped in place of the
    previous one. When a refresh fails the last known mapping (possibly stale,
    possibly empty) is served instead.
    """

    def __init__(
        self,
        chain_registry: ChainRegistry,
        balancer_api_client: BalancerApiClient,
        erc20_service_factory: Callable[[ChainConfig], Erc20Service],
        cache_seconds: int = DEFAULT_CACHE_SECONDS,
        clock: Callable[[], int] = timestamp_now,
    ):
        self.chain_registry = chain_registry
        self.balancer_api_client = balancer_api_client
        self.erc20_service_factory = erc20_service_factory
        self.cache_seconds = cache_seconds
        self.clock = clock
        self._cache: dict[str, CachedMapping] = {}

    def get_mapping(self, chain_slug: str) -> TokenMapping:
        cache_key = chain_slug.lower()
        cached = self._cache.get(cache_key)
        now = self.clock()
        if is_fresh(cached, now, self.cache_seconds):
            return cached.value

        try:
            mapping = self._fetch_mapping(cache_key)
        except Exception as e:
            logger.error(f'Failed to fetch token mapping for chain {chain_slug}: {e}')
            return cached.value if cached is not None else {}

        self._cache[cache_key] = CachedMapping(value=mapping, fetched_at=now)
        return mapping

    def _fetch_mapping(self, chain_slug: str) -> TokenMapping:
        chain_config = self.chain_registry.get_config(chain_slug)
        registry_tokens = [
            token
            for token in self.balancer_api_client.get_tokens(chain_config.api_slug)
            if token.resolves_to_underlying
        ]
        if not registry_tokens:
            return {}

        erc20_service = self.erc20_service_factory(chain_config)
        underlying_tokens = erc20_service.get_token_infos(
            [token.underlying_token_address for token in registry_tokens]
        )
        mapping = {}
        for registry_token, underlying in zip(registry_tokens, underlying_tokens):
            mapping[registry_token.address.lower()] = TokenInfo(
                address=registry_token.underlying_token_address.lower(),
                name=underlying.name,
                symbol=underlying.symbol,
                decimals=underlying.decimals,
            )
        logger.info(f'Loaded {len(mapping)} underlying token mappings for chain {chain_slug}')
        return mapping

    def resolve_one(self, token: TokenInfo, chain_slug: str) -> TokenInfo:
        return self.get_mapping(chain_slug).get(token.address.lower(), token)

    def resolve_many(self, tokens: Sequence[TokenInfo], chain_slug: str) -> list[TokenInfo]:
        mapping = self.get_mapping(chain_slug)
        return [mapping.get(token.address.lower(), token) for token in tokens]

    def resolve_in_swaps(self, swaps: Sequence[Swap], chain_slug: str) -> list[Swap]:
        mapping = self.get_mapping(chain_slug)
        resolved = []
        for swap in swaps:
            token_in = mapping.get(swap.token_in.lower())
            token_out = mapping.get(swap.token_out.lower())
            resolved.append(
                dataclasses.replace(
                    swap,
                    token_in=token_in.address if token_in else swap.token_in,
                    token_out=token_out.address if token_out else swap.token_out,
                    token_in_symbol=token_in.symbol if token_in else swap.token_in_symbol,
                    token_out_symbol=token_out.symbol if token_out else swap.token_out_symbol,
                )
            )
        return resolved

    def resolve_in_add_removes(
        self, add_removes: Sequence[AddRemove], chain_slug: str
    ) -> list[AddRemove]:
        mapping = self.get_mapping(chain_slug)
        return [
            dataclasses.replace(
                add_remove, pool=self._resolve_pool_tokens(add_remove.pool, mapping)
            )
            for add_remove in add_removes
        ]

    def resolve_in_pool(self, pool: Pool, chain_slug: str) -> Pool:
        return self._resolve_pool_tokens(pool, self.get_mapping(chain_slug))

    @staticmethod
    def _resolve_pool_tokens(pool: Pool, mapping: TokenMapping) -> Pool:
        if not mapping:
            return pool
        return dataclasses.replace(
            pool, tokens=[_resolve_pool_token(token, mapping) for token in pool.tokens]
        )


def _resolve_pool_token(token: PoolToken, mapping: TokenMapping) -> PoolToken:
    # balance and index stay those of the wrapper token held by the pool
    underlying = mapping.get(token.address.lower())
    if underlying is None:
        return token
    return dataclasses.replace(
        token,
        address=underlying.address,
        name=underlying.name,
        symbol=underlying.symbol,
        decimals=underlying.decimals if underlying.decimals is not None else DEFAULT_TOKEN_DECIMALS,
    )
