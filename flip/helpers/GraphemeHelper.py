#!/usr/bin/env python
# -*- coding: utf-8 -*-
# Copyright(c) 2021 The MITRE Corporation. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# You may obtain a copy of the License at:
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import io
import logging
import regex
from typing import List
from flip.helpers.StreamHelper import LineError

__version__ = "1.0.0"

log = logging.getLogger(__name__)

# Extended grapheme cluster, Unicode default rules
GRAPHEME = regex.compile(r'\X')


def segment(line: str) -> List[str]:
    return GRAPHEME.findall(line)


def reverse_graphemes(line: str) -> str:
    """
    Reverse the user perceived characters of a line. Each grapheme
    cluster is kept intact, only their order changes.

    :param str line: Text to reverse, without its terminator.

    :return: The mirrored text.
    :rtype: str
    """

    return ''.join(reversed(segment(line)))


def split_lines(stream):
    """
    Iterate over a binary stream by line, stripping the terminator
    ('\\n' or '\\r\\n'). A final line without a terminator is still
    produced.

    :param stream: Binary stream supporting readline().
    """

    while True:
        line = stream.readline()
        if not line:
            return
        if line.endswith(b'\n'):
            line = line[:-1]
            if line.endswith(b'\r'):
                line = line[:-1]
        yield line


class LineReverser():
    """
    LineReverser object.
    """

    def __init__(
            self,
            stream,
            encoding: str = 'utf-8',
    ):

        self.stream = stream
        self.encoding: str = encoding

        if isinstance(stream, io.RawIOBase):
            self.stream = io.BufferedReader(stream)

    def lines(self):
        """
        Decode the stream line by line, stopping at the first line that
        cannot be read or decoded.

        :return: Generator of (line number, text) pairs, numbered from 1.
        """

        line_number = 1
        lines = split_lines(self.stream)

        while True:
            try:
                raw = next(lines)
            except StopIteration:
                return
            except OSError as e:
                log.debug('Read failure at line %s: %s' % (line_number, e))
                raise LineError(line_number) from e

            try:
                text = raw.decode(self.encoding)
            except UnicodeDecodeError as e:
                log.debug('Decode failure at line %s: %s' % (line_number, e))
                raise LineError(line_number) from e

            yield line_number, text
            line_number += 1

    def reversed_lines(self):
        for _, text in self.lines():
            yield reverse_graphemes(text) + '\n'

    def write_to(self, out) -> int:
        """
        Write every reversed line to the supplied text stream as soon as
        it is produced.

        :param out: Writable text stream.

        :return: Number of lines written.
        :rtype: int
        """

        count = 0
        for line in self.reversed_lines():
            out.write(line)
            out.flush()
            count += 1

        log.debug('Reversed %s lines.' % count)
        return count
