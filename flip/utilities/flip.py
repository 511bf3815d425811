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

import sys
import logging
import argparse
from flip.helpers import StreamHelper
from flip.helpers.GraphemeHelper import LineReverser

__version__ = "1.0.0"

log = logging.getLogger(__name__)


def initialize_parser():
    parser = argparse.ArgumentParser(
        prog='flip',
        description='Reverse the characters in each line.',
        epilog='Like \'cat\', but reverses the characters in each line '
               'before printing them to stdout. Unicode-aware.')
    parser.add_argument('files', metavar='FILE', nargs='*',
                        help='Full path to the file(s) to be processed. '
                             'Reads from stdin if none are given.')
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__,
                        help='Display version info.')
    parser.add_argument('-v', '--verbose', action='store_true', default=False,
                        help='Output additional information when processing '
                             '(mostly for debugging purposes).')
    return parser


def run(files, out=None):
    """
    Reverse every line of the supplied files, or stdin when there are
    none, writing the results to out.

    :param list files: File paths to read, in order.
    :param out: Writable text stream, stdout by default.

    :return: Exit status.
    :rtype: int
    """

    if out is None:
        out = sys.stdout

    try:
        with StreamHelper.open_input(files) as chain:
            LineReverser(chain).write_to(out)
    except StreamHelper.FlipError as e:
        log.debug('Aborting: %r' % e.__cause__)
        print('flip: %s' % e, file=sys.stderr)
        return 1

    return 0


def main(argv=None):

    p = initialize_parser()
    args = p.parse_args(argv)

    root = logging.getLogger()
    logging.basicConfig()
    if args.verbose:
        root.setLevel(logging.DEBUG)
    else:
        root.setLevel(logging.WARNING)

    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8')

    sys.exit(run(args.files))


if __name__ == '__main__':
    main()
