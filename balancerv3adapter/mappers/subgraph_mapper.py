# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


from balancerv3adapter.domain.add_remove import AddRemove
from balancerv3adapter.domain.event import Block
from balancerv3adapter.domain.pool import Pool, PoolToken
from balancerv3adapter.domain.swap import Swap
from balancerv3adapter.domain.token import RegistryToken
from balancerv3adapter.enumeration.event_type import AddRemoveType
from balancerv3adapter.utils import to_int_or_none


def _user_id(item: dict) -> str:
    user = item.get('user')
    if isinstance(user, dict):
        return user.get('id', '')
    return user or ''


class SubgraphMapper:
    """Turns raw GraphQL payloads into typed records at the ingestion boundary."""

    @staticmethod
    def pool_token_from_dict(token_dict: dict) -> PoolToken:
        decimals = to_int_or_none(token_dict.get('decimals'))
        return PoolToken(
            address=token_dict['address'],
            name=token_dict.get('name') or '',
            symbol=token_dict.get('symbol') or '',
            decimals=18 if decimals is None else decimals,
            balance=token_dict.get('balance', '0'),
            index=to_int_or_none(token_dict.get('index')),
        )

    @staticmethod
    def pool_from_dict(pool_dict: dict) -> Pool:
        return Pool(
            id=pool_dict.get('id') or pool_dict['address'],
            address=pool_dict['address'],
            name=pool_dict.get('name') or '',
            symbol=pool_dict.get('symbol') or '',
            swap_fee=pool_dict.get('swapFee') or '',
            tokens=[
                SubgraphMapper.pool_token_from_dict(token)
                for token in pool_dict.get('tokens') or []
            ],
            block_number=to_int_or_none(pool_dict.get('blockNumber')),
            block_timestamp=to_int_or_none(pool_dict.get('blockTimestamp')),
            transaction_hash=pool_dict.get('transactionHash'),
            pool_creator=pool_dict.get('poolCreator'),
        )

    @staticmethod
    def swap_from_dict(swap_dict: dict) -> Swap:
        return Swap(
            id=swap_dict['id'],
            pool=swap_dict['pool'],
            token_in=swap_dict['tokenIn'],
            token_out=swap_dict['tokenOut'],
            token_amount_in=swap_dict['tokenAmountIn'],
            token_amount_out=swap_dict['tokenAmountOut'],
            user=_user_id(swap_dict),
            block_number=int(swap_dict['blockNumber']),
            block_timestamp=int(swap_dict['blockTimestamp']),
            transaction_hash=swap_dict['transactionHash'],
            log_index=int(swap_dict['logIndex']),
        )

    @staticmethod
    def add_remove_from_dict(add_remove_dict: dict) -> AddRemove:
        # anything but ADD is a withdrawal
        add_remove_type = (
            AddRemoveType.ADD if add_remove_dict.get('type') == 'ADD' else AddRemoveType.REMOVE
        )
        return AddRemove(
            id=add_remove_dict['id'],
            type=add_remove_type,
            sender=add_remove_dict.get('sender') or '',
            amounts=list(add_remove_dict.get('amounts') or []),
            pool=SubgraphMapper.pool_from_dict(add_remove_dict['pool']),
            user=_user_id(add_remove_dict),
            block_number=int(add_remove_dict['blockNumber']),
            block_timestamp=int(add_remove_dict['blockTimestamp']),
            transaction_hash=add_remove_dict['transactionHash'],
            log_index=int(add_remove_dict['logIndex']),
        )

    @staticmethod
    def block_from_meta(meta_dict: dict) -> Block:
        block = meta_dict['block']
        return Block(
            block_number=int(block['number']),
            block_timestamp=int(block['timestamp']),
        )

    @staticmethod
    def registry_token_from_dict(token_dict: dict) -> RegistryToken:
        review_data = token_dict.get('erc4626ReviewData') or {}
        return RegistryToken(
            address=token_dict['address'],
            underlying_token_address=token_dict.get('underlyingTokenAddress'),
            use_underlying_for_add_remove=bool(review_data.get('useUnderlyingForAddRemove')),
            can_use_buffer_for_swaps=bool(review_data.get('canUseBufferForSwaps')),
        )
