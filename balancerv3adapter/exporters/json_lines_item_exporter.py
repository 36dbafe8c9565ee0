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
from typing import Any

import click


class JsonLinesItemExporter:
    """
    Writes items as newline-delimited JSON to a file or to stdout ("-").
    """

    def __init__(self, output: str):
        self._output = output
        self._file = None
        self.exported_count = 0

    def open(self):
        if self._file is not None:
            raise RuntimeError('already opened')
        self._file = click.open_file(self._output, 'w')

    def export_item(self, item: dict[str, Any]):
        if self._file is None:
            self.open()
        self._file.write(json.dumps(item))
        self._file.write('\n')
        self.exported_count += 1

    def export_items(self, items):
        for item in items:
            self.export_item(item)

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None
