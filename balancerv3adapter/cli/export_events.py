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


import logging

import click

from balancerv3adapter.config.envs import envs
from balancerv3adapter.exporters.json_lines_item_exporter import JsonLinesItemExporter
from balancerv3adapter.logging_utils import logging_basic_config
from balancerv3adapter.mappers.event_mapper import EventMapper
from balancerv3adapter.service.adapter_factory import AdapterFactory

logger = logging.getLogger(__name__)


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option('-c', '--chain', required=True, type=str, help='Chain slug, e.g. ethereum or sonic.')
@click.option('-s', '--from-block', required=True, type=int, help='Start block, inclusive.')
@click.option('-e', '--to-block', required=True, type=int, help='End block, inclusive.')
@click.option(
    '-o',
    '--output',
    default='-',
    show_default=True,
    type=str,
    help='The output file for events as newline-delimited JSON. Use "-" for stdout',
)
def export_events(chain, from_block, to_block, output):
    """Exports normalized swap, join and exit events of a block range."""
    logging_basic_config()
    adapter = AdapterFactory(envs).get_adapter(chain)
    events = adapter.get_events(from_block, to_block)

    exporter = JsonLinesItemExporter(output)
    exporter.open()
    try:
        exporter.export_items(EventMapper.dict_from_event(event) for event in events)
    finally:
        exporter.close()
    logger.info(f'Exported {exporter.exported_count} events from block {from_block} to {to_block}')
