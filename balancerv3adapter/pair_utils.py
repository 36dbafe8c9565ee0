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


import dataclasses

from eth_utils import is_hex_address, to_checksum_address

from balancerv3adapter.domain.pair import Pair, ParsedPairId
from balancerv3adapter.domain.pool import Pool
from balancerv3adapter.exceptions import AddressFormatError, FormatError

PAIR_ID_SEPARATOR = '-'


def generate_pair_id(pool_address: str, asset0_id: str, asset1_id: str) -> str:
    """{pool}-{asset0}-{asset1}, assets ordered case-insensitively, original case kept."""
    a0, a1 = sorted((asset0_id, asset1_id), key=str.lower)
    return PAIR_ID_SEPARATOR.join((pool_address, a0, a1))


def derive_pair_ids(pool: Pool) -> list[str]:
    """One pair id per unordered token combination of the pool, C(n, 2) in total."""
    token_addresses = [token.address for token in pool.tokens]
    pair_ids = []
    for i in range(len(token_addresses)):
        for j in range(i + 1, len(token_addresses)):
            pair_ids.append(generate_pair_id(pool.address, token_addresses[i], token_addresses[j]))
    return pair_ids


def _split_pair_id(pair_id: str) -> list[str]:
    parts = pair_id.split(PAIR_ID_SEPARATOR) if isinstance(pair_id, str) else []
    if len(parts) != 3 or not all(parts):
        raise FormatError(f'Invalid pair ID format: {pair_id}')
    return parts


def parse_pair_id(pair_id: str) -> ParsedPairId:
    pool_address, asset0, asset1 = _split_pair_id(pair_id)
    return ParsedPairId(
        pool_address=pool_address.lower(),
        asset0=asset0.lower(),
        asset1=asset1.lower(),
    )


def is_swap_for_pair(pair_id: str, token_in: str, token_out: str) -> bool:
    parsed = parse_pair_id(pair_id)
    token_in = token_in.lower()
    token_out = token_out.lower()
    if token_in == token_out:
        return False

    return (token_in == parsed.asset0 and token_out == parsed.asset1) or (
        token_in == parsed.asset1 and token_out == parsed.asset0
    )


def is_add_remove_for_pair(pair_id: str, pool: Pool) -> bool:
    parsed = parse_pair_id(pair_id)
    if pool.address.lower() != parsed.pool_address:
        return False

    pool_tokens = {token.address.lower() for token in pool.tokens}
    return parsed.asset0 in pool_tokens and parsed.asset1 in pool_tokens


def checksum_address(address: str) -> str:
    is_valid = isinstance(address, str) and address.startswith('0x') and is_hex_address(address)
    if not is_valid:
        raise AddressFormatError(f'Invalid address: {address}')
    return to_checksum_address(address.lower())


def checksum_pair_id(pair_id: str) -> str:
    return PAIR_ID_SEPARATOR.join(checksum_address(part) for part in _split_pair_id(pair_id))


def checksum_pair(pair: Pair) -> Pair:
    pool = pair.pool
    if pool is not None:
        pool = dataclasses.replace(
            pool,
            id=checksum_address(pool.id),
            asset_ids=[checksum_address(asset_id) for asset_id in pool.asset_ids],
            pair_ids=[checksum_pair_id(pair_id) for pair_id in pool.pair_ids],
        )
    return dataclasses.replace(
        pair,
        id=checksum_pair_id(pair.id),
        asset0_id=checksum_address(pair.asset0_id),
        asset1_id=checksum_address(pair.asset1_id),
        creator=checksum_address(pair.creator) if pair.creator else None,
        pool=pool,
    )
