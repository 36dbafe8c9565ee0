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


import math
from collections.abc import Callable, Hashable, Iterable, Sequence
from datetime import datetime
from typing import TypeVar

import pytz

from balancerv3adapter.domain.pool import PoolToken
from balancerv3adapter.exceptions import FormatError

T = TypeVar('T')
K = TypeVar('K', bound=Hashable)


def to_int_or_none(val):
    if isinstance(val, int):
        return val
    if val is None or val == '':
        return None
    try:
        return int(val)
    except ValueError:
        return None


def validate_range(range_start_incl, range_end_incl):
    if range_start_incl < 0 or range_end_incl < 0:
        raise FormatError('range_start and range_end must be greater or equal to 0')

    if range_end_incl < range_start_incl:
        raise FormatError('fromBlock must be less than or equal to toBlock')


def timestamp_now() -> int:
    return int(datetime.now(tz=pytz.UTC).timestamp())


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Groups items by key, keeping first-seen order of keys and of items within a group."""
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def _parse_float(value) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(parsed):
        return None
    return parsed


def float_to_str(value: float) -> str:
    # shortest round-trip repr, integral values without the trailing ".0"
    text = repr(value)
    if text.endswith('.0'):
        text = text[:-2]
    return text


def calculate_price(amount_in: str, amount_out: str) -> str:
    """
    Price of the input asset expressed in the output asset: amount_out / amount_in.

    Double precision display value, not settlement math. Returns "0" for unparsable
    or zero amounts and for non-finite results.
    """
    amt_in = _parse_float(amount_in)
    amt_out = _parse_float(amount_out)
    if amt_in is None or amt_out is None:
        return '0'
    if amt_in == 0 or amt_out == 0:
        return '0'

    price = amt_out / amt_in
    if not math.isfinite(price):
        return '0'
    return float_to_str(price)


def calculate_reserves(
    pool_tokens: Sequence[PoolToken], asset0_id: str, asset1_id: str
) -> tuple[str, str] | None:
    """Raw balances of both assets, or None when either is missing from the token list."""
    asset0_id = asset0_id.lower()
    asset1_id = asset1_id.lower()
    asset0_balance = next(
        (token.balance for token in pool_tokens if token.address.lower() == asset0_id), None
    )
    asset1_balance = next(
        (token.balance for token in pool_tokens if token.address.lower() == asset1_id), None
    )
    if asset0_balance is None or asset1_balance is None:
        return None
    return asset0_balance, asset1_balance


def convert_fee_to_bps(fee: str | None) -> float:
    """
    Balancer stores the swap fee as a fraction, e.g. "0.001" for 0.1%.
    The adapter reports it as fraction * 100 (0.001 -> 0.1).
    """
    if not fee:
        return 0
    parsed = _parse_float(fee)
    if parsed is None or parsed < 0 or not math.isfinite(parsed):
        return 0
    return parsed * 100


def format_units(value: int, decimals: int) -> str:
    """Renders an integer token amount in whole-token units without trailing zeros."""
    sign = '-' if value < 0 else ''
    whole, fraction = divmod(abs(value), 10**decimals)
    fraction_str = str(fraction).rjust(decimals, '0').rstrip('0') if decimals else ''
    if fraction_str:
        return f'{sign}{whole}.{fraction_str}'
    return f'{sign}{whole}'
