#!/usr/bin/env python3
# dlitz 2022

import argparse
import codecs
import logging
import sys
import warnings

from . import CODEC_NAME, Matched, UnmappedCharacterWarning, encode, encoding_table

logger = logging.getLogger(__name__)

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='macroman-encode',
        description='Convert UTF-8 text to MacRoman bytes for legacy bitmap fonts.')
    # Binary, so CR and CRLF line endings reach the encoder untouched.
    parser.add_argument('infile', nargs='?', type=argparse.FileType('rb'),
        default=None, help='UTF-8 text to convert (default: stdin)')
    parser.add_argument('-o', '--output', metavar='OUTPUT',
        help='write MacRoman bytes (or the --dump listing) here (default: stdout)')
    parser.add_argument('--errors', default='strict', metavar='HANDLER',
        help='codec error handler for unmapped characters (default: %(default)s)')
    parser.add_argument('--dump', action='store_true',
        help='print one line per encoded unit instead of writing bytes')
    parser.add_argument('-v', '--verbose', action='store_true',
        help='enable debug logging')
    args = parser.parse_args(argv)
    return args, parser

def read_input(infile):
    if infile is None:
        return sys.stdin.buffer.read().decode('utf-8')
    with infile:
        return infile.read().decode('utf-8')

def dump_units(text, outfile):
    for unit in encode(text):
        if isinstance(unit, Matched):
            print(f"{unit.pos:d}\t{unit.length:d}\t0x{unit.byte:02x}", file=outfile)
        else:
            print(f"{unit.pos:d}\t{unit.length:d}\tunmapped U+{ord(unit.codepoint):04X}", file=outfile)

def count_unmapped(text, *, warn=False):
    count = 0
    for unit in encode(text):
        if isinstance(unit, Matched):
            continue
        count += 1
        if warn:
            warnings.warn(f"position {unit.pos:d}: U+{ord(unit.codepoint):04X} has no MacRoman equivalent", UnmappedCharacterWarning)
    return count

def main(argv=None):
    args, parser = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    logging.getLogger(__package__).setLevel(logging.DEBUG if args.verbose else logging.NOTSET)
    logger.debug("using %r", encoding_table)

    try:
        text = read_input(args.infile)
    except UnicodeDecodeError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1

    try:
        codecs.lookup_error(args.errors)
    except LookupError as exc:
        parser.error(str(exc))

    if args.dump:
        if args.output is None:
            dump_units(text, sys.stdout)
        else:
            with open(args.output, 'w', encoding='utf-8') as outfile:
                dump_units(text, outfile)
        return 0

    unmapped = count_unmapped(text, warn=args.errors != 'strict')

    try:
        data = text.encode(CODEC_NAME, args.errors)
    except UnicodeEncodeError as exc:
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1
    logger.debug("encoded %d code points into %d bytes, %d unmapped", len(text), len(data), unmapped)

    if args.output is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        with open(args.output, 'wb') as outfile:
            outfile.write(data)
    return 0

if __name__ == '__main__':
    sys.exit(main())
