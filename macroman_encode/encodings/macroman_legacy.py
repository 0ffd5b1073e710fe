#!python3
# dlitz 2022

import codecs

from ..cursor import MacRomanEncoder, Matched
from ..reference import decoding_table
from ..table import encoding_table

CODEC_NAME = 'macroman-legacy'

def _needs_more_input(input, pos, table):
    # More input could still turn the tail into a longer match.
    if len(input) - pos >= table.max_key_length:
        return False
    return table.is_proper_prefix(input[pos:])

def _encode_replacement(replacement, exc, table):
    if isinstance(replacement, bytes):
        return replacement
    result = bytearray()
    for unit in MacRomanEncoder(replacement, table):
        if not isinstance(unit, Matched):
            raise exc
        result.append(unit.byte)
    return bytes(result)

def macroman_encode(input, errors='strict', final=True, table=None):
    if table is None:
        table = encoding_table
    output = bytearray()
    offset = 0
    cursor = MacRomanEncoder(input, table)
    while not cursor.exhausted:
        pos = offset + cursor.pos
        if not final and _needs_more_input(input, pos, table):
            return bytes(output), pos
        unit = cursor.next_unit()
        if isinstance(unit, Matched):
            output.append(unit.byte)
            continue
        exc = UnicodeEncodeError(CODEC_NAME, input, pos, pos + 1, "character maps to <undefined>")
        replacement, newpos = codecs.lookup_error(errors)(exc)
        output += _encode_replacement(replacement, exc, table)
        if newpos < 0:
            newpos += len(input)
        if not 0 <= newpos <= len(input):
            raise IndexError(f"position {newpos} from error handler out of bounds")
        if newpos != pos + 1:
            offset = newpos
            cursor = MacRomanEncoder(input[newpos:], table)
    return bytes(output), len(input)

class Codec(codecs.Codec):

    def encode(self, input, errors='strict'):
        return macroman_encode(input, errors)

    def decode(self, input, errors='strict'):
        return codecs.charmap_decode(input, errors, decoding_table)

class IncrementalEncoder(codecs.BufferedIncrementalEncoder):
    def _buffer_encode(self, input, errors, final):
        return macroman_encode(input, errors, final)

class IncrementalDecoder(codecs.IncrementalDecoder):
    def decode(self, input, final=False):
        return codecs.charmap_decode(input, self.errors, decoding_table)[0]

class StreamReader(Codec, codecs.StreamReader):
    pass

class StreamWriter(Codec, codecs.StreamWriter):
    pass

### encodings module API
def getregentry():
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )

def codec_search_function(encoding_name):
    if encoding_name in ('macroman-legacy', 'macroman_legacy'):
        return getregentry()

codecs.register(codec_search_function)
