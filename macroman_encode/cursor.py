#!python3
# dlitz 2022

from dataclasses import dataclass

from .table import encoding_table

@dataclass(frozen=True)
class Matched:
    pos:int             # index of the first code point consumed
    length:int          # number of code points consumed
    byte:int            # MacRoman code

@dataclass(frozen=True)
class Unmapped:
    pos:int
    codepoint:str       # the single code point that was skipped

    @property
    def length(self):
        return 1

class MacRomanEncoder:
    """Greedy longest-match walk over one string.

    Each step consumes the longest sequence the table knows about at the
    current position and yields `Matched`, or consumes exactly one code
    point and yields `Unmapped` if nothing matches.  Once the input is used
    up the encoder is exhausted for good; start a new one to go again.
    """

    def __init__(self, text, table=None):
        if table is None:
            table = encoding_table
        if not isinstance(text, str):
            text = "".join(chr(c) if isinstance(c, int) else c for c in text)
        self.text = text
        self.table = table
        self.pos = 0

    @property
    def exhausted(self):
        return self.pos >= len(self.text)

    @property
    def remaining(self):
        return self.text[self.pos:]

    def next_unit(self):
        if self.exhausted:
            return None
        pos = self.pos
        match = self.table.lookup_longest_prefix(self.text, pos)
        if match is None:
            self.pos += 1
            return Unmapped(pos, self.text[pos])
        byte, length = match
        assert length >= 1, match
        self.pos += length
        return Matched(pos, length, byte)

    def iter_units(self):
        unit = self.next_unit()
        while unit is not None:
            yield unit
            unit = self.next_unit()

    def __iter__(self):
        return self

    def __next__(self):
        unit = self.next_unit()
        if unit is None:
            raise StopIteration
        return unit

def encode(text, table=None):
    return MacRomanEncoder(text, table)
