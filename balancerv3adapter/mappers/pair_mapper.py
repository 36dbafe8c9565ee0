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


from balancerv3adapter.domain.pair import Pair, PairPool
from balancerv3adapter.domain.token import Erc20Token


class PairMapper:
    @staticmethod
    def dict_from_pair_pool(pool: PairPool) -> dict:
        return {
            'id': pool.id,
            'name': pool.name,
            'assetIds': list(pool.asset_ids),
            'pairIds': list(pool.pair_ids),
            'metadata': dict(pool.metadata),
        }

    @staticmethod
    def dict_from_pair(pair: Pair) -> dict:
        item = {
            'id': pair.id,
            'dexKey': pair.dex_key,
            'feeBps': pair.fee_bps,
            'asset0Id': pair.asset0_id,
            'asset1Id': pair.asset1_id,
            'creationBlockNumber': pair.creation_block_number,
            'creationBlockTimestamp': pair.creation_block_timestamp,
            'creationTxnId': pair.creation_txn_id,
            'creator': pair.creator,
        }
        if pair.pool is not None:
            item['pool'] = PairMapper.dict_from_pair_pool(pair.pool)
        return item


class AssetMapper:
    @staticmethod
    def dict_from_erc20_token(token: Erc20Token) -> dict:
        return {
            'id': token.address,
            'name': token.name,
            'symbol': token.symbol,
            'totalSupply': token.total_supply,
        }
