#!python3
# dlitz 2022

from collections.abc import Mapping
from dataclasses import dataclass
import logging

from . import reference

logger = logging.getLogger(__name__)

class TableIntegrityError(Exception):
    pass

class DuplicateSequenceError(TableIntegrityError):
    pass

class InvalidEntryError(TableIntegrityError):
    pass

@dataclass(frozen=True)
class TableEntry:
    sequence:str
    byte:int

    @classmethod
    def fromraw(cls, raw):
        sequence, byte = raw
        if not isinstance(sequence, str) or not sequence:
            raise InvalidEntryError(f"sequence must be a non-empty str: {sequence!r}")
        if not isinstance(byte, int) or not 0 <= byte <= 0xff:
            raise InvalidEntryError(f"byte out of range for {sequence!r}: {byte!r}")
        return cls(sequence, byte)

class EncodingTable(Mapping):
    """Maps codepoint sequences to single MacRoman bytes.

    Keys are grouped by length so that the longest prefix of some input can
    be found by trying each length from `max_key_length` down to 1.  The
    table is never modified once built, so one instance can be shared by any
    number of encoders on any number of threads.
    """

    def __init__(self, by_length):
        self._by_length = by_length
        self._lengths = sorted(by_length, reverse=True)
        self.max_key_length = self._lengths[0] if self._lengths else 0

        prefixes = set()
        for length, seqs in by_length.items():
            for seq in seqs:
                for i in range(1, length):
                    prefixes.add(seq[:i])
        self._proper_prefixes = frozenset(prefixes)

    @classmethod
    def fromentries(cls, entries):
        by_length = {}
        count = 0
        for raw in entries:
            entry = raw if isinstance(raw, TableEntry) else TableEntry.fromraw(raw)
            seqs = by_length.setdefault(len(entry.sequence), {})
            if entry.sequence in seqs:
                raise DuplicateSequenceError(
                    f"duplicate sequence {_format_sequence(entry.sequence)}: "
                    f"0x{seqs[entry.sequence]:02x} and 0x{entry.byte:02x}")
            seqs[entry.sequence] = entry.byte
            count += 1
        table = cls(by_length)
        logger.debug("built encoding table: %d entries, max key length %d", count, table.max_key_length)
        return table

    def __getitem__(self, sequence):
        if not isinstance(sequence, str):
            raise KeyError(sequence)
        try:
            return self._by_length[len(sequence)][sequence]
        except KeyError:
            raise KeyError(sequence) from None

    def __contains__(self, sequence):
        if not isinstance(sequence, str):
            return False
        return sequence in self._by_length.get(len(sequence), ())

    def __iter__(self):
        for length in sorted(self._by_length):
            yield from self._by_length[length]

    def __len__(self):
        return sum(len(seqs) for seqs in self._by_length.values())

    def __repr__(self):
        return f"<{type(self).__name__} entries={len(self)} max_key_length={self.max_key_length}>"

    def entries(self):
        for sequence in self:
            yield TableEntry(sequence, self[sequence])

    def is_proper_prefix(self, sequence):
        return sequence in self._proper_prefixes

    def lookup_longest_prefix(self, remaining, start=0):
        window = remaining[start:start + self.max_key_length]
        for length in self._lengths:
            if length > len(window):
                continue
            byte = self._by_length[length].get(window[:length])
            if byte is not None:
                return (byte, length)
        return None

def _format_sequence(sequence):
    return " ".join(f"U+{ord(c):04X}" for c in sequence)

def _make_encoding_table():
    return EncodingTable.fromentries(reference.iter_known_sequences())

encoding_table = _make_encoding_table()
