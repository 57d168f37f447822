from types import SimpleNamespace

import pytest

import snekjson
from snekjson import DecodeError, ErrorCode, Option


def nested(depth, inner='1'):
    return '[' * depth + inner + ']' * depth


##
## decode
##


@pytest.mark.parametrize(
    'text, expected',
    [
        ('null', None),
        ('true', True),
        ('false', False),
        ('0', 0),
        ('-12', -12),
        ('2.5', 2.5),
        ('1e3', 1000.0),
        ('"snek"', 'snek'),
        ('[]', []),
        ('[1, "a", null]', [1, 'a', None]),
    ],
)
def test_decode_values(text, expected):
    value = snekjson.decode(text)
    assert value == expected
    assert type(value) is type(expected)


def test_decode_objects_as_records():
    value = snekjson.decode('{"a": 1, "b": {"c": [true]}}')

    assert isinstance(value, SimpleNamespace)
    assert value.a == 1
    assert isinstance(value.b, SimpleNamespace)
    assert value.b.c == [True]


def test_decode_objects_as_mappings():
    value = snekjson.decode('{"b": 1, "a": {"c": 2}}', assoc=True)

    assert value == {'b': 1, 'a': {'c': 2}}
    assert list(value) == ['b', 'a']


def test_decode_object_as_array_option():
    assert snekjson.decode('{"a": {"b": 1}}', options=Option.OBJECT_AS_ARRAY) == {'a': {'b': 1}}


def test_decode_bytes():
    value = snekjson.decode(b'{"a": "\xc3\xa9"}', assoc=True)
    assert value == {'a': '\N{LATIN SMALL LETTER E WITH ACUTE}'}
    assert snekjson.decode(bytearray(b'[1]')) == [1]
    assert snekjson.decode(memoryview(b'[2]')) == [2]


def test_decode_fresh_values():
    text = '{"a": [1]}'
    first = snekjson.decode(text, assoc=True)
    first['a'].append(2)

    assert snekjson.decode(text, assoc=True) == {'a': [1]}


def test_decode_rejects_non_text():
    with pytest.raises(TypeError):
        snekjson.decode(42)


##
## errors
##


@pytest.mark.parametrize(
    'text',
    [
        '{invalid',
        '',
        '   ',
        '[1, 2',
        '[1,]',
        '{"a" 1}',
        "{'a': 1}",
        'NaN',
        '[1] 2',
        'undefined',
    ],
)
def test_decode_malformed(text):
    with pytest.raises(DecodeError) as info:
        snekjson.decode(text)

    exc = info.value
    assert exc.code == ErrorCode.SYNTAX
    assert str(exc).startswith('Unable to decode JSON: ')
    assert exc.message
    assert exc.__cause__ is not None


def test_decode_invalid_utf8():
    with pytest.raises(DecodeError) as info:
        snekjson.decode(b'"a\xffb"')
    assert info.value.code == ErrorCode.UTF8


def test_decode_lone_surrogate():
    with pytest.raises(DecodeError) as info:
        snekjson.decode('"\ud800"')
    assert info.value.code == ErrorCode.UTF8


def test_decode_invalid_surrogate_escape():
    with pytest.raises(DecodeError) as info:
        snekjson.decode(r'"\udc00x"')
    assert info.value.code == ErrorCode.UTF16


def test_decode_invalid_utf8_ignore():
    assert snekjson.decode(b'"a\xffb"', options=Option.INVALID_UTF8_IGNORE) == 'ab'


def test_decode_invalid_utf8_substitute():
    options = Option.INVALID_UTF8_SUBSTITUTE | Option.INVALID_UTF8_IGNORE
    assert snekjson.decode(b'"a\xffb"', options=options) == 'a\N{REPLACEMENT CHARACTER}b'


def test_decode_error_is_codec_error():
    with pytest.raises(snekjson.CodecError):
        snekjson.decode('{invalid')
    with pytest.raises(snekjson.SnekJSONError):
        snekjson.decode('{invalid')


##
## depth
##


@pytest.mark.parametrize(
    'text, depth',
    [
        ('[]', 1),
        ('[1]', 1),
        ('{"a": 1}', 1),
        ('[[1]]', 2),
        ('{"a": [1]}', 2),
        ('[{"a": {"b": 1}}]', 3),
    ],
)
def test_depth_at_limit(text, depth):
    snekjson.decode(text, depth=depth)

    with pytest.raises(DecodeError) as info:
        snekjson.decode(f'[{text}]', depth=depth)
    assert info.value.code == ErrorCode.DEPTH


def test_default_depth():
    assert snekjson.DEFAULT_DEPTH == 512
    snekjson.decode(nested(512))

    with pytest.raises(DecodeError) as info:
        snekjson.decode(nested(513))
    assert info.value.code == ErrorCode.DEPTH


def test_scalars_have_no_depth():
    assert snekjson.decode('"deep"', depth=1) == 'deep'
    assert snekjson.decode('[1]', depth=1) == [1]


@pytest.mark.parametrize('depth', [0, -1])
def test_invalid_depth(depth):
    with pytest.raises(ValueError):
        snekjson.decode('[]', depth=depth)


##
## options
##


def test_bigint_as_string():
    big = '123456789012345678901234567890'
    text = f'[{big}, 12, {2**63 - 1}, -{2**63}]'

    value = snekjson.decode(text, options=Option.BIGINT_AS_STRING)

    assert value == [big, 12, 2**63 - 1, -(2**63)]


def test_throw_on_error_is_stripped():
    options = Option.THROW_ON_ERROR | Option.OBJECT_AS_ARRAY
    assert snekjson.decode('{"a": 1}', options=options) == {'a': 1}

    with pytest.raises(DecodeError):
        snekjson.decode('{invalid', options=Option.THROW_ON_ERROR)


##
## try_decode / as_array / is_valid
##


def test_try_decode_ok():
    result = snekjson.try_decode('[1, 2]')

    assert result.ok
    assert result.error is None
    assert result.unwrap() == [1, 2]


def test_try_decode_error():
    result = snekjson.try_decode('{invalid')

    assert not result.ok
    assert result.value is None
    assert isinstance(result.error, DecodeError)
    with pytest.raises(DecodeError):
        result.unwrap()


def test_as_array():
    assert snekjson.as_array('{"a": {"b": [{"c": null}]}}') == {'a': {'b': [{'c': None}]}}
    assert snekjson.as_array('[1]') == [1]


def test_as_array_error():
    with pytest.raises(DecodeError):
        snekjson.as_array('{invalid')


@pytest.mark.parametrize(
    'text, expected',
    [
        ('{}', True),
        ('[]', True),
        ('"x"', True),
        ('null', True),
        (b'{"a": 1}', True),
        (nested(512), True),
        ('{invalid', False),
        ('', False),
        ('[1,]', False),
        (b'"\xff"', False),
        ('"\ud800"', False),
        (r'"\udc00x"', False),
        (nested(513), False),
    ],
)
def test_is_valid(text, expected):
    assert snekjson.is_valid(text) is expected
