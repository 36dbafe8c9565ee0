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


from balancerv3adapter.domain.event import (
    Block,
    JoinExitEvent,
    NormalizedEvent,
    Reserves,
    SwapEvent,
)


class EventMapper:
    @staticmethod
    def dict_from_block(block: Block) -> dict:
        return {
            'blockNumber': block.block_number,
            'blockTimestamp': block.block_timestamp,
        }

    @staticmethod
    def dict_from_reserves(reserves: Reserves | None) -> dict | None:
        if reserves is None:
            return None
        return {'asset0': reserves.asset0, 'asset1': reserves.asset1}

    @staticmethod
    def dict_from_swap_event(event: SwapEvent) -> dict:
        item = {
            'block': EventMapper.dict_from_block(event.block),
            'eventType': event.event_type.value,
            'txnId': event.txn_id,
            'txnIndex': event.txn_index,
            'eventIndex': event.event_index,
            'maker': event.maker,
            'pairId': event.pair_id,
        }
        # only the two directional amounts that apply to the swap are present
        for key, value in (
            ('asset0In', event.asset0_in),
            ('asset1Out', event.asset1_out),
            ('asset0Out', event.asset0_out),
            ('asset1In', event.asset1_in),
        ):
            if value is not None:
                item[key] = value
        item['priceNative'] = event.price_native
        item['reserves'] = EventMapper.dict_from_reserves(event.reserves)
        return item

    @staticmethod
    def dict_from_join_exit_event(event: JoinExitEvent) -> dict:
        return {
            'block': EventMapper.dict_from_block(event.block),
            'eventType': event.event_type.value,
            'txnId': event.txn_id,
            'txnIndex': event.txn_index,
            'eventIndex': event.event_index,
            'maker': event.maker,
            'pairId': event.pair_id,
            'amount0': event.amount0,
            'amount1': event.amount1,
            'reserves': EventMapper.dict_from_reserves(event.reserves),
        }

    @staticmethod
    def dict_from_event(event: NormalizedEvent) -> dict:
        if isinstance(event, SwapEvent):
            return EventMapper.dict_from_swap_event(event)
        return EventMapper.dict_from_join_exit_event(event)
