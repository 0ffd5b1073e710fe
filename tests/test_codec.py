import codecs
import io

import pytest

import macroman_encode
from macroman_encode import CODEC_NAME, encode_bytes

EMOJI = '\U0001f600'

def test_lookup():
    assert codecs.lookup('macroman-legacy').name == CODEC_NAME
    assert codecs.lookup('macroman_legacy').name == CODEC_NAME
    assert codecs.lookup('MacRoman-Legacy').name == CODEC_NAME

def test_encode():
    assert 'caf\u00e9'.encode(CODEC_NAME) == b'caf\x8e'
    assert 'cafe\u0301'.encode(CODEC_NAME) == b'caf\x8e'
    assert '\u00a4\u20ac\u03a9\u2126\uf8ff'.encode(CODEC_NAME) == b'\xdb\xdb\xbd\xbd\xf0'

def test_encode_empty():
    assert ''.encode(CODEC_NAME) == b''

def test_decode():
    assert b'caf\x8e'.decode(CODEC_NAME) == 'caf\u00e9'
    assert b'\xdb\xbd\xf0'.decode(CODEC_NAME) == '\u20ac\u03a9\uf8ff'

def test_decode_all_bytes():
    assert bytes(range(256)).decode(CODEC_NAME) == macroman_encode.reference.decoding_table

def test_strict():
    with pytest.raises(UnicodeEncodeError) as excinfo:
        ('a' + EMOJI + 'b').encode(CODEC_NAME)
    exc = excinfo.value
    assert exc.encoding == CODEC_NAME
    assert (exc.start, exc.end) == (1, 2)
    assert exc.object[exc.start:exc.end] == EMOJI

@pytest.mark.parametrize('errors, expected', [
    ('ignore', b'ab'),
    ('replace', b'a?b'),
    ('xmlcharrefreplace', b'a&#128512;b'),
    ('backslashreplace', b'a\\U0001f600b'),
])
def test_error_handlers(errors, expected):
    assert ('a' + EMOJI + 'b').encode(CODEC_NAME, errors) == expected

def test_replace_each_unmapped_character():
    assert (EMOJI * 3).encode(CODEC_NAME, 'replace') == b'???'

def _skip_two(exc):
    return ('', exc.end + 1)

codecs.register_error('test.macroman.skip-two', _skip_two)

def test_error_handler_moves_position():
    assert ('a' + EMOJI + 'xb').encode(CODEC_NAME, 'test.macroman.skip-two') == b'ab'

def _bad_replacement(exc):
    return (EMOJI, exc.end)

codecs.register_error('test.macroman.bad-replacement', _bad_replacement)

def test_unencodable_replacement():
    with pytest.raises(UnicodeEncodeError):
        ('a' + EMOJI).encode(CODEC_NAME, 'test.macroman.bad-replacement')

def _bytes_replacement(exc):
    return (b'\xf0', exc.end)

codecs.register_error('test.macroman.bytes-replacement', _bytes_replacement)

def test_bytes_replacement():
    assert ('a' + EMOJI).encode(CODEC_NAME, 'test.macroman.bytes-replacement') == b'a\xf0'

def test_incremental_holds_back_base_letter():
    encoder = codecs.getincrementalencoder(CODEC_NAME)()
    assert encoder.encode('cafe') == b'caf'
    assert encoder.encode('\u0301') == b'\x8e'
    assert encoder.encode('', final=True) == b''

def test_incremental_flush_on_final():
    encoder = codecs.getincrementalencoder(CODEC_NAME)()
    assert encoder.encode('e') == b''
    assert encoder.encode('', final=True) == b'e'

def test_incremental_one_char_at_a_time():
    text = 'Cre\u0300me bru\u0302le\u0301e, U\u0308ber, o\u0303, \u00e9t\u00e9 \uf8ff'
    encoder = codecs.getincrementalencoder(CODEC_NAME)()
    chunks = [encoder.encode(c) for c in text]
    chunks.append(encoder.encode('', final=True))
    assert b''.join(chunks) == text.encode(CODEC_NAME)

def test_incremental_reset():
    encoder = codecs.getincrementalencoder(CODEC_NAME)()
    encoder.encode('e')
    encoder.reset()
    assert encoder.encode('', final=True) == b''

def test_incremental_state():
    encoder = codecs.getincrementalencoder(CODEC_NAME)()
    encoder.encode('ae')
    state = encoder.getstate()
    other = codecs.getincrementalencoder(CODEC_NAME)()
    other.setstate(state)
    assert other.encode('\u0301', final=True) == b'\x8e'

def test_incremental_strict_error():
    encoder = codecs.getincrementalencoder(CODEC_NAME)()
    with pytest.raises(UnicodeEncodeError):
        encoder.encode('a' + EMOJI)

def test_incremental_decoder():
    decoder = codecs.getincrementaldecoder(CODEC_NAME)()
    assert decoder.decode(b'caf') + decoder.decode(b'\x8e', final=True) == 'caf\u00e9'

def test_stream_writer_and_reader():
    buf = io.BytesIO()
    writer = codecs.getwriter(CODEC_NAME)(buf)
    writer.write('na\u00efve ')
    writer.write('\u2126')
    assert buf.getvalue() == b'na\x95ve \xbd'

    reader = codecs.getreader(CODEC_NAME)(io.BytesIO(b'na\x95ve \xbd'))
    assert reader.read() == 'na\u00efve \u03a9'

def test_encode_bytes():
    assert encode_bytes('e\u0301' + EMOJI, 'replace') == b'\x8e?'
    with pytest.raises(UnicodeEncodeError):
        encode_bytes(EMOJI)
