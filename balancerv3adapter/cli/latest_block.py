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


import json

import click

from balancerv3adapter.config.envs import envs
from balancerv3adapter.logging_utils import logging_basic_config
from balancerv3adapter.mappers.event_mapper import EventMapper
from balancerv3adapter.service.adapter_factory import AdapterFactory


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option('-c', '--chain', required=True, type=str, help='Chain slug, e.g. ethereum or sonic.')
def latest_block(chain):
    """Prints the latest block indexed by the chain's subgraph."""
    logging_basic_config()
    block = AdapterFactory(envs).get_adapter(chain).get_latest_block()
    click.echo(json.dumps({'block': EventMapper.dict_from_block(block)}))
