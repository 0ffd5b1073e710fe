#!python3
# dlitz 2022

from .cursor import MacRomanEncoder, Matched, Unmapped, encode
from .table import (
    DuplicateSequenceError,
    EncodingTable,
    InvalidEntryError,
    TableEntry,
    TableIntegrityError,
    encoding_table,
)
from .encodings import macroman_legacy
from .encodings.macroman_legacy import CODEC_NAME

__version__ = '0.1.0'

class MacRomanWarning(Warning):
    pass

class UnmappedCharacterWarning(MacRomanWarning):
    pass

def encode_bytes(text, errors='strict'):
    return macroman_legacy.macroman_encode(text, errors)[0]
