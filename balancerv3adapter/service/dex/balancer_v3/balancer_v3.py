import dataclasses
import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from balancerv3adapter.domain.add_remove import AddRemove
from balancerv3adapter.domain.chain import ChainConfig
from balancerv3adapter.domain.event import (
    Block,
    JoinExitEvent,
    NormalizedEvent,
    Reserves,
    SwapEvent,
)
from balancerv3adapter.domain.pair import Pair, PairPool
from balancerv3adapter.domain.pool import Pool, PoolToken
from balancerv3adapter.domain.swap import Swap
from balancerv3adapter.domain.token import Erc20Token
from balancerv3adapter.enumeration.event_type import AddRemoveType, EventType
from balancerv3adapter.exceptions import NotFoundError, UpstreamError
from balancerv3adapter.graphql.subgraph_client import BalancerV3SubgraphClient
from balancerv3adapter.misc.info import DEX_KEY
from balancerv3adapter.pair_utils import (
    checksum_address,
    checksum_pair,
    checksum_pair_id,
    derive_pair_ids,
    generate_pair_id,
    is_add_remove_for_pair,
    is_swap_for_pair,
    parse_pair_id,
)
from balancerv3adapter.service.dex.base.interface import DexAdapterInterface
from balancerv3adapter.service.erc20_service import Erc20Service
from balancerv3adapter.utils import (
    calculate_price,
    calculate_reserves,
    convert_fee_to_bps,
    group_by,
    validate_range,
)


def _reserves(tokens: Sequence[PoolToken] | None, asset0: str, asset1: str) -> Reserves | None:
    if tokens is None:
        return None
    balances = calculate_reserves(tokens, asset0, asset1)
    if balances is None:
        return None
    return Reserves(asset0=balances[0], asset1=balances[1])


def _token_index(pool: Pool, address: str) -> int | None:
    return next(
        (i for i, token in enumerate(pool.tokens) if token.address.lower() == address),
        None,
    )


def _amount_at(amounts: Sequence[str], index: int | None) -> str:
    if index is None or index >= len(amounts) or not amounts[index]:
        return '0'
    return amounts[index]


class BalancerV3Adapter(DexAdapterInterface):
    """
    Normalizes Balancer V3 subgraph activity of one chain into DEX Screener events.

    Every call is a fresh derivation over freshly fetched subgraph data. Pair ids are
    derived from pool token lists after underlying token resolution.
    """

    def __init__(
        self,
        chain_config: ChainConfig,
        subgraph_client: BalancerV3SubgraphClient,
        erc20_service: Erc20Service,
    ):
        self.chain_config = chain_config
        self.subgraph_client = subgraph_client
        self.erc20_service = erc20_service
        self.logger = logging.getLogger(f'{__name__}[{chain_config.api_slug}]')

    def get_latest_block(self) -> Block:
        return self.subgraph_client.get_latest_block()

    def get_events(self, from_block: int, to_block: int) -> list[NormalizedEvent]:
        validate_range(from_block, to_block)
        self.logger.info(f'Fetching events from block {from_block} to {to_block}')

        # a failed listing fetch is fatal for the whole request
        with ThreadPoolExecutor(max_workers=2) as executor:
            swaps_future = executor.submit(
                self.subgraph_client.get_all_swaps, from_block, to_block
            )
            add_removes_future = executor.submit(
                self.subgraph_client.get_all_add_removes, from_block, to_block
            )
            swaps = swaps_future.result()
            add_removes = add_removes_future.result()

        # one snapshot per (pool, block) serves swaps and joins/exits alike
        pools_at_block: dict[tuple[str, int], Pool | None] = {}
        converted = [
            *self.convert_swaps(swaps, pools_at_block),
            *self.convert_join_exits(add_removes, pools_at_block),
        ]
        events = [self.checksum_event(event) for event in converted]
        # txnIndex restarts at 0 in every transaction, so ties inside a block are
        # broken by per-transaction position, not by transaction order
        return sorted(events, key=lambda event: (event.block.block_number, event.txn_index))

    def get_pair(self, pair_id: str) -> Pair:
        parsed = parse_pair_id(pair_id)
        pool = self.subgraph_client.get_pool(parsed.pool_address)
        if pool is None:
            raise NotFoundError(f'Pool not found: {parsed.pool_address}')
        if not is_add_remove_for_pair(pair_id, pool):
            raise NotFoundError(f'Pair not found: {pair_id}')

        pair = Pair(
            id=pair_id,
            dex_key=DEX_KEY,
            fee_bps=convert_fee_to_bps(pool.swap_fee),
            asset0_id=parsed.asset0,
            asset1_id=parsed.asset1,
            creation_block_number=pool.block_number,
            creation_block_timestamp=pool.block_timestamp,
            creation_txn_id=pool.transaction_hash,
            creator=pool.pool_creator,
            pool=PairPool(
                id=pool.address,
                name=pool.name,
                asset_ids=[token.address for token in pool.tokens],
                pair_ids=derive_pair_ids(pool),
                metadata={'symbol': pool.symbol},
            ),
        )
        return checksum_pair(pair)

    def get_asset(self, asset_id: str) -> Erc20Token:
        address = checksum_address(asset_id)
        token = self.erc20_service.get_token_info(address)
        return dataclasses.replace(token, address=address)

    def convert_swaps(
        self,
        swaps: Sequence[Swap],
        pools_at_block: dict[tuple[str, int], Pool | None] | None = None,
    ) -> list[SwapEvent]:
        events = []
        pools_at_block = {} if pools_at_block is None else pools_at_block
        pools_by_block = group_by(swaps, key=lambda swap: (swap.block_number, swap.pool.lower()))
        for (block_number, pool_address), block_pool_swaps in pools_by_block.items():
            # reserves must reflect the pool at the block of the swap
            pool = self._cached_pool_at_block(pools_at_block, pool_address, block_number)
            pair_ids = derive_pair_ids(pool) if pool is not None else None
            tokens = pool.tokens if pool is not None else None

            swaps_by_txn = group_by(block_pool_swaps, key=lambda swap: swap.transaction_hash)
            for txn_swaps in swaps_by_txn.values():
                sorted_swaps = sorted(txn_swaps, key=lambda swap: swap.log_index)
                for txn_index, swap in enumerate(sorted_swaps):
                    for pair_id in self._pair_ids_for_swap(swap, pair_ids):
                        events.append(self._swap_event(swap, pair_id, txn_index, tokens))
        return events

    @staticmethod
    def _pair_ids_for_swap(swap: Swap, pair_ids: list[str] | None) -> list[str]:
        if pair_ids is not None:
            return [
                pair_id
                for pair_id in pair_ids
                if is_swap_for_pair(pair_id, swap.token_in, swap.token_out)
            ]
        # pool snapshot unavailable: the swap's own tokens still identify one pair
        if swap.token_in.lower() == swap.token_out.lower():
            return []
        return [generate_pair_id(swap.pool, swap.token_in, swap.token_out)]

    @staticmethod
    def _swap_event(
        swap: Swap, pair_id: str, txn_index: int, tokens: Sequence[PoolToken] | None
    ) -> SwapEvent:
        parsed = parse_pair_id(pair_id)
        is_asset0_in = swap.token_in.lower() == parsed.asset0
        if is_asset0_in:
            price = calculate_price(swap.token_amount_in, swap.token_amount_out)
        else:
            price = calculate_price(swap.token_amount_out, swap.token_amount_in)

        event = SwapEvent(
            block=Block(block_number=swap.block_number, block_timestamp=swap.block_timestamp),
            txn_id=swap.transaction_hash,
            txn_index=txn_index,
            event_index=swap.log_index,
            maker=swap.user,
            pair_id=pair_id,
            price_native=price,
            reserves=_reserves(tokens, parsed.asset0, parsed.asset1),
        )
        if is_asset0_in:
            event.asset0_in = swap.token_amount_in
            event.asset1_out = swap.token_amount_out
        else:
            event.asset1_in = swap.token_amount_in
            event.asset0_out = swap.token_amount_out
        return event

    def convert_join_exits(
        self,
        add_removes: Sequence[AddRemove],
        pools_at_block: dict[tuple[str, int], Pool | None] | None = None,
    ) -> list[JoinExitEvent]:
        events = []
        pools_at_block = {} if pools_at_block is None else pools_at_block

        add_removes_by_txn = group_by(add_removes, key=lambda item: item.transaction_hash)
        for txn_add_removes in add_removes_by_txn.values():
            sorted_add_removes = sorted(txn_add_removes, key=lambda item: item.log_index)
            for txn_index, add_remove in enumerate(sorted_add_removes):
                # the embedded snapshot gives pairs and token positions
                pool = add_remove.pool
                pair_ids = [
                    pair_id
                    for pair_id in derive_pair_ids(pool)
                    if is_add_remove_for_pair(pair_id, pool)
                ]
                if not pair_ids:
                    continue

                # reserves come from a point lookup at the event's own block
                pool_at_block = self._cached_pool_at_block(
                    pools_at_block, pool.address.lower(), add_remove.block_number
                )
                tokens = pool_at_block.tokens if pool_at_block is not None else None

                for pair_id in pair_ids:
                    events.append(self._join_exit_event(add_remove, pair_id, txn_index, tokens))
        return events

    @staticmethod
    def _join_exit_event(
        add_remove: AddRemove, pair_id: str, txn_index: int, tokens: Sequence[PoolToken] | None
    ) -> JoinExitEvent:
        parsed = parse_pair_id(pair_id)
        asset0_index = _token_index(add_remove.pool, parsed.asset0)
        asset1_index = _token_index(add_remove.pool, parsed.asset1)
        event_type = EventType.JOIN if add_remove.type == AddRemoveType.ADD else EventType.EXIT

        return JoinExitEvent(
            block=Block(
                block_number=add_remove.block_number,
                block_timestamp=add_remove.block_timestamp,
            ),
            event_type=event_type,
            txn_id=add_remove.transaction_hash,
            txn_index=txn_index,
            event_index=add_remove.log_index,
            maker=add_remove.user,
            pair_id=pair_id,
            amount0=_amount_at(add_remove.amounts, asset0_index),
            amount1=_amount_at(add_remove.amounts, asset1_index),
            reserves=_reserves(tokens, parsed.asset0, parsed.asset1),
        )

    def _cached_pool_at_block(
        self,
        pools_at_block: dict[tuple[str, int], Pool | None],
        pool_address: str,
        block_number: int,
    ) -> Pool | None:
        key = (pool_address, block_number)
        if key not in pools_at_block:
            pools_at_block[key] = self._get_pool_at_block(pool_address, block_number)
        return pools_at_block[key]

    def _get_pool_at_block(self, pool_address: str, block_number: int) -> Pool | None:
        try:
            pool = self.subgraph_client.get_pool(pool_address, block_number)
        except UpstreamError as e:
            self.logger.warning(f'Failed to fetch pool {pool_address} at block {block_number}: {e}')
            return None
        if pool is None:
            self.logger.warning(f'Pool {pool_address} not found at block {block_number}')
        return pool

    @staticmethod
    def checksum_event(event: NormalizedEvent) -> NormalizedEvent:
        return dataclasses.replace(
            event,
            maker=checksum_address(event.maker),
            pair_id=checksum_pair_id(event.pair_id),
        )
