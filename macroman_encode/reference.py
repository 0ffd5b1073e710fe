#!python3
# dlitz 2022
#
# Ref: https://www.unicode.org/Public/MAPPINGS/VENDORS/APPLE/ROMAN.TXT
# Ref: https://en.wikipedia.org/wiki/Mac_OS_Roman

### Decoding Table

def _make_decoding_table():
    result = [
    *(chr(c) for c in range(128)),
    # 0x80
    '\u00c4', '\u00c5', '\u00c7', '\u00c9', '\u00d1', '\u00d6', '\u00dc', '\u00e1',
    '\u00e0', '\u00e2', '\u00e4', '\u00e3', '\u00e5', '\u00e7', '\u00e9', '\u00e8',
    # 0x90
    '\u00ea', '\u00eb', '\u00ed', '\u00ec', '\u00ee', '\u00ef', '\u00f1', '\u00f3',
    '\u00f2', '\u00f4', '\u00f6', '\u00f5', '\u00fa', '\u00f9', '\u00fb', '\u00fc',
    # 0xa0
    '\u2020', '\u00b0', '\u00a2', '\u00a3', '\u00a7', '\u2022', '\u00b6', '\u00df',
    '\u00ae', '\u00a9', '\u2122', '\u00b4', '\u00a8', '\u2260', '\u00c6', '\u00d8',
    # 0xb0
    '\u221e', '\u00b1', '\u2264', '\u2265', '\u00a5', '\u00b5', '\u2202', '\u2211',
    '\u220f', '\u03c0', '\u222b', '\u00aa', '\u00ba', '\u03a9', '\u00e6', '\u00f8',
    # 0xc0
    '\u00bf', '\u00a1', '\u00ac', '\u221a', '\u0192', '\u2248', '\u2206', '\u00ab',
    '\u00bb', '\u2026', '\u00a0', '\u00c0', '\u00c3', '\u00d5', '\u0152', '\u0153',
    # 0xd0
    '\u2013', '\u2014', '\u201c', '\u201d', '\u2018', '\u2019', '\u00f7', '\u25ca',
    '\u00ff', '\u0178', '\u2044', '\u20ac', '\u2039', '\u203a', '\ufb01', '\ufb02',
    # 0xe0
    '\u2021', '\u00b7', '\u201a', '\u201e', '\u2030', '\u00c2', '\u00ca', '\u00c1',
    '\u00cb', '\u00c8', '\u00cd', '\u00ce', '\u00cf', '\u00cc', '\u00d3', '\u00d4',
    # 0xf0
    '\uf8ff', '\u00d2', '\u00da', '\u00db', '\u00d9', '\u0131', '\u02c6', '\u02dc',
    '\u00af', '\u02d8', '\u02d9', '\u02da', '\u00b8', '\u02dd', '\u02db', '\u02c7',
]
    assert len(result) == 256, len(result)
    return "".join(result)

decoding_table = _make_decoding_table()

# 0xF0 is the Apple logo, which Apple puts in the Corporate Private Use Area.
APPLE_LOGO = '\uf8ff'

### Decomposed forms
#
# Base letter followed by a single combining mark.  These are listed
# separately from the decoding table because text coming from some sources
# (HFS+ filenames, for one) arrives in NFD.

GRAVE = '\u0300'
ACUTE = '\u0301'
CIRCUMFLEX = '\u0302'
TILDE = '\u0303'
DIAERESIS = '\u0308'
RING = '\u030a'
CEDILLA = '\u0327'

DECOMPOSED_SEQUENCES = [
    ('A' + GRAVE, 0xcb), ('A' + ACUTE, 0xe7), ('A' + CIRCUMFLEX, 0xe5),
    ('A' + TILDE, 0xcc), ('A' + DIAERESIS, 0x80), ('A' + RING, 0x81),
    ('C' + CEDILLA, 0x82),
    ('E' + GRAVE, 0xe9), ('E' + ACUTE, 0x83), ('E' + CIRCUMFLEX, 0xe6),
    ('E' + DIAERESIS, 0xe8),
    ('I' + GRAVE, 0xed), ('I' + ACUTE, 0xea), ('I' + CIRCUMFLEX, 0xeb),
    ('I' + DIAERESIS, 0xec),
    ('N' + TILDE, 0x84),
    ('O' + GRAVE, 0xf1), ('O' + ACUTE, 0xee), ('O' + CIRCUMFLEX, 0xef),
    ('O' + TILDE, 0xcd), ('O' + DIAERESIS, 0x85),
    ('U' + GRAVE, 0xf4), ('U' + ACUTE, 0xf2), ('U' + CIRCUMFLEX, 0xf3),
    ('U' + DIAERESIS, 0x86),
    ('Y' + DIAERESIS, 0xd9),
    ('a' + GRAVE, 0x88), ('a' + ACUTE, 0x87), ('a' + CIRCUMFLEX, 0x89),
    ('a' + TILDE, 0x8b), ('a' + DIAERESIS, 0x8a), ('a' + RING, 0x8c),
    ('c' + CEDILLA, 0x8d),
    ('e' + GRAVE, 0x8f), ('e' + ACUTE, 0x8e), ('e' + CIRCUMFLEX, 0x90),
    ('e' + DIAERESIS, 0x91),
    ('i' + GRAVE, 0x93), ('i' + ACUTE, 0x92), ('i' + CIRCUMFLEX, 0x94),
    ('i' + DIAERESIS, 0x95),
    ('n' + TILDE, 0x96),
    ('o' + GRAVE, 0x98), ('o' + ACUTE, 0x97), ('o' + CIRCUMFLEX, 0x99),
    ('o' + TILDE, 0x9b), ('o' + DIAERESIS, 0x9a),
    ('u' + GRAVE, 0x9d), ('u' + ACUTE, 0x9c), ('u' + CIRCUMFLEX, 0x9e),
    ('u' + DIAERESIS, 0x9f),
    ('y' + DIAERESIS, 0xd8),
]

### Aliases
#
# Characters that are not in the decoding table but share a code with one
# that is.  Which one is "correct" only matters when going *to* Unicode.

ALIASES = [
    ('\u00a4', 0xdb),    # CURRENCY SIGN: 0xDB before Mac OS 8.5, EURO SIGN after
    ('\u2126', 0xbd),    # OHM SIGN, same glyph as GREEK CAPITAL LETTER OMEGA
]

def iter_known_sequences():
    for n, c in enumerate(decoding_table):
        yield (c, n)
    yield from DECOMPOSED_SEQUENCES
    yield from ALIASES
