import pytest

from propcodec import (
    InvalidPropertyNameError,
    NameTooLongError,
    PayloadTooLongError,
    Property,
    PropertyCodec,
    PropertyEncodingError,
    PropertyType,
    PropertyWriter,
    UnencodableTextError,
    UnsupportedPropertyTypeError,
)
from propcodec.conf.settings import CodecSettings
from propcodec.hashing import hash_text
from propcodec_tests.utils import Account


@pytest.fixture
def writer() -> PropertyWriter:
    return PropertyWriter(CodecSettings())


def test_empty_writer(writer: PropertyWriter) -> None:
    assert writer.token_count == 0
    assert writer.checksum == 0
    assert writer.finalize() == '0000000000'


def test_typed_adders(writer: PropertyWriter) -> None:
    writer.add_int_property('i', 1)
    writer.add_real_property('r', 2)
    writer.add_string_property('s', '3')
    writer.add(Property('p', PropertyType.INT, -4))
    assert writer.token_count == 4
    assert writer.checksum == sum(map(hash_text, ['i=1', 'r=2.0', 's=3', 'p=-4']))
    assert writer.finalize().startswith('i003i=1r005r=2.0s003s=3i004p=-4')


@pytest.mark.parametrize('name', ['a', 'amount', 'abcdefgh', 'abcdefghij', 'naïve', 'with space'])
def test_valid_names(writer: PropertyWriter, name: str) -> None:
    writer.add_property(name, 1)
    assert writer.token_count == 1


def test_name_too_long(writer: PropertyWriter) -> None:
    with pytest.raises(NameTooLongError):
        writer.add_property('abcdefghijk', 1)
    # checked before the other name rules
    with pytest.raises(NameTooLongError):
        writer.add_property('a=bcdefghijk', 1)
    assert writer.token_count == 0


@pytest.mark.parametrize('name', ['', '=', 'a=b'])
def test_invalid_names(writer: PropertyWriter, name: str) -> None:
    with pytest.raises(InvalidPropertyNameError):
        writer.add_property(name, 1)


def test_payload_length_limit(writer: PropertyWriter) -> None:
    # 'a=' plus 997 characters is exactly 999
    writer.add_property('a', 'x' * 997)
    assert writer.token_count == 1
    checksum = writer.checksum

    with pytest.raises(PayloadTooLongError):
        writer.add_property('b', 'x' * 998)
    assert writer.token_count == 1
    assert writer.checksum == checksum

    document = writer.finalize()
    assert document.startswith('s999a=')
    assert len(document) == 4 + 999 + 10


def test_integer_too_large(writer: PropertyWriter) -> None:
    with pytest.raises(PayloadTooLongError):
        writer.add_property('big', 10 ** 5000)
    assert writer.token_count == 0


@pytest.mark.parametrize('value', [None, [1], {'a': 1}, b'bytes', 1j])
def test_unsupported_values(writer: PropertyWriter, value: object) -> None:
    with pytest.raises(UnsupportedPropertyTypeError):
        writer.add_property('a', value)  # type: ignore[arg-type]
    # also a TypeError for callers that do not know the codec exceptions
    with pytest.raises(TypeError):
        writer.add_property('a', value)  # type: ignore[arg-type]


def test_mismatched_typed_adders(writer: PropertyWriter) -> None:
    with pytest.raises(UnsupportedPropertyTypeError):
        writer.add_int_property('a', 1.5)  # type: ignore[arg-type]
    with pytest.raises(UnsupportedPropertyTypeError):
        writer.add_real_property('a', 'x')  # type: ignore[arg-type]
    with pytest.raises(UnsupportedPropertyTypeError):
        writer.add_string_property('a', 1)  # type: ignore[arg-type]
    assert writer.token_count == 0


def test_finalize_twice(writer: PropertyWriter) -> None:
    writer.add_property('a', 1)
    writer.finalize()
    with pytest.raises(PropertyEncodingError):
        writer.finalize()
    with pytest.raises(PropertyEncodingError):
        writer.add_property('b', 2)


def test_serialize_propagates_encoding_errors() -> None:
    class BadAccount(Account):
        def serialize_properties(self, writer: PropertyWriter) -> None:
            writer.add_property('account_owner', self.owner)

    with pytest.raises(NameTooLongError):
        PropertyCodec().serialize(BadAccount())


def test_custom_name_length() -> None:
    writer = PropertyWriter(CodecSettings(MAX_NAME_LENGTH=3))
    writer.add_property('abc', 1)
    with pytest.raises(NameTooLongError):
        writer.add_property('abcd', 1)


@pytest.mark.parametrize('name, value', [
    ('s', 'bad\ud800'),
    ('s', '\udfff'),
    ('bad\ud800', 'ok'),
])
def test_unencodable_text_leaves_writer_unchanged(writer: PropertyWriter, name: str, value: str) -> None:
    with pytest.raises(UnencodableTextError):
        writer.add_property(name, value)
    assert writer.token_count == 0
    assert writer.checksum == 0

    writer.add_property('a', 1)
    assert writer.finalize() == 'i003a=1' + '0000095157'


def test_real_overflow(writer: PropertyWriter) -> None:
    with pytest.raises(UnsupportedPropertyTypeError):
        writer.add_real_property('r', 10 ** 400)
    assert writer.token_count == 0
