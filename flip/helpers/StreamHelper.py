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
import sys
import logging
import contextlib
from typing import List

__version__ = "1.0.0"

log = logging.getLogger(__name__)


class FlipError(Exception):
    """
    Base class for failures raised while flipping input.
    """


class OpenFailure(FlipError):

    def __init__(self, message: str = 'one or more files could not be '
                                      'opened (are you sure they exist?)'):
        super().__init__(message)


class LineError(FlipError):

    def __init__(self, line_number: int):
        self.line_number: int = line_number
        super().__init__('failed to reverse line# %s' % line_number)


class MultiChain(io.RawIOBase):
    """
    A bunch of binary streams collapsed together into one, in the manner
    itertools.chain() would do for iterables.
    """

    def __init__(
            self,
            streams: list = None,
            close_streams: bool = True,
    ):

        self.streams: list = []
        self.close_streams: bool = True
        self._current: int = 0
        self._pending: Exception = None

        if streams is None:
            streams = []

        streams = list(streams)

        for s in streams:
            if not hasattr(s, 'readinto') and not hasattr(s, 'read'):
                raise TypeError('Supplied stream %r is not readable.' % s)

        self.streams = streams
        self.close_streams = close_streams

        super().__init__()

    @property
    def current(self):
        return self._current

    @property
    def exhausted(self):
        return self._current >= len(self.streams)

    def readable(self):
        return True

    def _read_current(self, view):
        stream = self.streams[self._current]

        if hasattr(stream, 'readinto'):
            return stream.readinto(view)

        data = stream.read(len(view))
        if data is None:
            return None
        view[:len(data)] = data
        return len(data)

    def readinto(self, b):
        """
        Fill the supplied buffer from the active stream, moving on to the
        next stream each time the active one reports a zero byte read.

        :param b: Writable buffer to fill.

        :return: Number of bytes written, zero only at end of all streams.
        :rtype: int
        """

        view = memoryview(b).cast('B')
        max_bytes = len(view)
        bytes_written = 0

        if max_bytes == 0:
            return 0

        if self._pending is not None:
            e, self._pending = self._pending, None
            raise e

        while bytes_written < max_bytes and not self.exhausted:
            try:
                count = self._read_current(view[bytes_written:])
            except Exception as e:
                if bytes_written == 0:
                    raise
                # Hand back what we have, report the failure next call.
                self._pending = e
                break

            if count is None:
                raise BlockingIOError(
                    'Stream %s returned no data without blocking. '
                    'Only blocking streams are supported.' % self._current)

            if count == 0:
                log.debug('Stream %s exhausted, advancing.' % self._current)
                self._current += 1
            else:
                bytes_written += count

        return bytes_written

    def close(self):
        if self.closed:
            return

        try:
            if self.close_streams:
                with contextlib.ExitStack() as stack:
                    for s in self.streams:
                        stack.callback(s.close)
        finally:
            super().close()


def attempt_map(elements, mapper, release=None) -> list:
    """
    Map the function over the given elements, propagating an error
    immediately if any of the mappings fail. Results produced before the
    failure are handed to release, if supplied.

    :param elements: Finite iterable of items to map.
    :param mapper: Callable applied to each item.
    :param release: Callable applied to each finished result on failure.

    :return: Mapped results, in order.
    :rtype: list
    """

    results = []

    try:
        for e in elements:
            results.append(mapper(e))
    except Exception:
        if release is not None:
            for r in results:
                release(r)
        raise

    return results


def open_file(path):
    try:
        return open(path, 'rb')
    except OSError:
        log.debug('Failed to open %s.' % path)
        raise


def open_sources(paths) -> List[io.BufferedReader]:
    """
    Open each path for binary reading. Nothing stays open on failure.

    :param list paths: File paths, in the order they should be read.

    :return: Opened binary handles.
    :rtype: list
    """

    try:
        return attempt_map(paths, open_file, release=lambda f: f.close())
    except OSError as e:
        raise OpenFailure() from e


def open_input(paths) -> MultiChain:
    """
    Resolve the input to read. No paths means standard input, which is
    left open when the chain closes.

    :param list paths: File paths supplied by the user.

    :return: A chain over the resolved input.
    :rtype: MultiChain
    """

    if not paths:
        log.debug('No files supplied, reading from stdin.')
        return MultiChain([sys.stdin.buffer], close_streams=False)

    return MultiChain(open_sources(paths))
