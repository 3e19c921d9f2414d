import math
import unittest

import pytest
from structlog.testing import capture_logs

from propcodec import (
    ChecksumMismatchError,
    DeserializationError,
    MalformedDocumentError,
    Property,
    PropertyCodec,
    PropertyReader,
    PropertySerializable,
    PropertyType,
    PropertyWriter,
)
from propcodec.conf.settings import CodecSettings
from propcodec.hashing import hash_text
from propcodec.serialization.encoding.checksum import render_checksum
from propcodec_tests.utils import Account, Counter


def _checksum(*payloads: str) -> str:
    return render_checksum(sum(hash_text(payload) for payload in payloads), width=10)


class Envelope(PropertySerializable):
    """Stores the document of a nested Counter as a string property."""

    def __init__(self, codec: PropertyCodec, amount: int = 0, tag: int = 0) -> None:
        self.codec = codec
        self.inner = Counter(amount)
        self.tag = tag

    def serialize_properties(self, writer: PropertyWriter) -> None:
        writer.add_property('tag', self.tag)
        # serializing with the same codec while this writer is still open
        writer.add_property('inner', self.codec.serialize(self.inner))

    def deserialize_properties(self, reader: PropertyReader) -> None:
        self.tag = reader.get_int_property('tag')
        assert self.codec.deserialize(self.inner, reader.get_string_property('inner')).is_ok()


class PropertyCodecTestCase(unittest.TestCase):
    def setUp(self) -> None:
        super().setUp()
        self.codec = PropertyCodec()

    def test_serialize_single_int(self) -> None:
        document = self.codec.serialize(Counter(42))
        self.assertEqual(document, 'i009amount=42' + _checksum('amount=42'))
        self.assertEqual(len(document), 23)

    def test_deserialize_single_int(self) -> None:
        counter = Counter()
        result = self.codec.deserialize(counter, 'i009amount=42' + _checksum('amount=42'))
        self.assertTrue(result.is_ok())
        self.assertEqual(counter.amount, 42)

    def test_round_trip(self) -> None:
        account = Account(amount=-7, owner='Zoë = owner', rate=0.1)
        document = account.serialize(codec=self.codec)
        self.assertEqual(account.serialize_calls, 1)

        loaded = Account()
        self.assertTrue(loaded.deserialize(document, codec=self.codec))
        self.assertEqual(loaded.deserialize_calls, 1)
        self.assertEqual(loaded.amount, -7)
        self.assertEqual(loaded.owner, 'Zoë = owner')
        self.assertEqual(loaded.rate, 0.1)

    def test_round_trip_extreme_values(self) -> None:
        properties = [
            Property.from_value('big', 10 ** 50),
            Property.from_value('neg', -(10 ** 50)),
            Property.from_value('flag', True),
            Property.from_value('inf', math.inf),
            Property.from_value('tiny', 5e-324),
            Property.from_value('nan', math.nan),
            Property.from_value('empty', ''),
            Property.from_value('sep', '=='),
        ]
        store = self.codec.decode(self.codec.encode(properties)).unwrap()
        self.assertEqual(store.ints, {'big': 10 ** 50, 'neg': -(10 ** 50), 'flag': 1})
        self.assertEqual(store.reals['inf'], math.inf)
        self.assertEqual(store.reals['tiny'], 5e-324)
        self.assertTrue(math.isnan(store.reals['nan']))
        self.assertEqual(store.strings, {'empty': '', 'sep': '=='})

    def test_serialize_is_idempotent(self) -> None:
        account = Account(amount=1, owner='x', rate=2.5)
        first = self.codec.serialize(account)
        second = self.codec.serialize(account)
        self.assertEqual(first, second)
        self.assertEqual(account.serialize_calls, 2)

    def test_empty_document(self) -> None:
        store = self.codec.decode('0000000000').unwrap()
        self.assertEqual(len(store), 0)

        account = Account(amount=5, owner='x', rate=1.0)
        self.assertTrue(account.deserialize('0000000000', codec=self.codec))
        # missing properties fall back to their defaults
        self.assertEqual((account.amount, account.owner, account.rate), (0, '', 0.0))

    def test_token_order_does_not_matter(self) -> None:
        checksum = _checksum('a=1', 'b=2')
        first = self.codec.decode('i003a=1i003b=2' + checksum).unwrap()
        second = self.codec.decode('i003b=2i003a=1' + checksum).unwrap()
        self.assertEqual(first, second)
        self.assertEqual(first.ints, {'a': 1, 'b': 2})

    def test_last_duplicate_wins(self) -> None:
        writer = self.codec.create_writer()
        writer.add_property('amount', 1)
        writer.add_property('amount', 2)
        store = self.codec.decode(writer.finalize()).unwrap()
        self.assertEqual(store.ints, {'amount': 2})

    def test_same_name_different_types(self) -> None:
        document = self.codec.encode([
            Property('x', PropertyType.INT, 1),
            Property('x', PropertyType.REAL, 1.5),
            Property('x', PropertyType.STRING, 'one'),
        ])
        store = self.codec.decode(document).unwrap()
        self.assertEqual(store.ints, {'x': 1})
        self.assertEqual(store.reals, {'x': 1.5})
        self.assertEqual(store.strings, {'x': 'one'})
        self.assertCountEqual(store.iter_properties(), [
            Property('x', PropertyType.INT, 1),
            Property('x', PropertyType.REAL, 1.5),
            Property('x', PropertyType.STRING, 'one'),
        ])

    def test_truncated_checksum_leaves_object_unchanged(self) -> None:
        document = self.codec.serialize(Account(amount=42, owner='bob', rate=0.5))
        account = Account(amount=1, owner='alice', rate=9.0)
        self.assertFalse(account.deserialize(document[:-1], codec=self.codec))
        self.assertEqual(account.deserialize_calls, 0)
        self.assertEqual((account.amount, account.owner, account.rate), (1, 'alice', 9.0))

    def test_checksum_mismatch(self) -> None:
        counter = Counter(7)
        result = self.codec.deserialize(counter, 'i009amount=43' + _checksum('amount=42'))
        self.assertTrue(result.is_err())
        error = result.err()
        self.assertIsInstance(error, ChecksumMismatchError)
        self.assertEqual(error.claimed, _checksum('amount=42'))
        self.assertEqual(error.expected, _checksum('amount=43'))
        self.assertEqual(counter.amount, 7)

    def test_malformed_documents(self) -> None:
        documents = [
            '',
            '123',
            '000000000',
            'x009amount=42' + _checksum('amount=42'),
            'i0a9amount=42' + _checksum('amount=42'),
            'i009amount=ab' + _checksum('amount=ab'),
            'r009amount=ab' + _checksum('amount=ab'),
            'i008amount42' + _checksum('amount42'),
            'i020amount=42' + _checksum('amount=42'),
            'i009amount=42' + _checksum('amount=42') + '0',
        ]
        for document in documents:
            with self.subTest(document=document):
                counter = Counter(7)
                result = self.codec.deserialize(counter, document)
                self.assertIsInstance(result.err(), MalformedDocumentError)
                self.assertEqual(counter.amount, 7)

    def test_hooks_called_once(self) -> None:
        account = Account(amount=3)
        document = self.codec.serialize(account)
        self.codec.deserialize(account, document)
        self.assertEqual((account.serialize_calls, account.deserialize_calls), (1, 1))

        self.codec.deserialize(account, 'garbage')
        self.assertEqual(account.deserialize_calls, 1)

    def test_reentrant_calls(self) -> None:
        envelope = Envelope(self.codec, amount=42, tag=3)
        document = self.codec.serialize(envelope)

        inner_document = self.codec.serialize(Counter(42))
        expected = self.codec.encode([
            Property.from_value('tag', 3),
            Property.from_value('inner', inner_document),
        ])
        self.assertEqual(document, expected)

        loaded = Envelope(self.codec)
        self.assertTrue(self.codec.deserialize(loaded, document).is_ok())
        self.assertEqual((loaded.tag, loaded.inner.amount), (3, 42))

    def test_codec_is_shared_between_objects(self) -> None:
        documents = [self.codec.serialize(Counter(i)) for i in range(3)]
        counters = [Counter() for _ in documents]
        for counter, document in zip(counters, documents):
            self.assertTrue(counter.deserialize(document, codec=self.codec))
        self.assertEqual([c.amount for c in counters], [0, 1, 2])

    def test_default_codec(self) -> None:
        document = Counter(42).serialize()
        self.assertEqual(document, self.codec.serialize(Counter(42)))
        counter = Counter()
        self.assertTrue(counter.deserialize(document))
        self.assertEqual(counter.amount, 42)

    def test_custom_settings(self) -> None:
        settings = CodecSettings(MAX_NAME_LENGTH=4, LENGTH_FIELD_WIDTH=2, CHECKSUM_WIDTH=4, NAME_SEPARATOR=':')
        codec = PropertyCodec(settings=settings)
        self.assertIs(codec.settings, settings)

        document = codec.encode([Property.from_value('a', 42)])
        self.assertEqual(document, 'i04a:42' + render_checksum(hash_text('a:42'), width=4))
        store = codec.decode(document).unwrap()
        self.assertEqual(store.ints, {'a': 42})

        # a document with the default layout cannot be read with this one
        self.assertTrue(codec.decode(self.codec.encode([Property.from_value('a', 42)])).is_err())

    def test_rejection_is_logged(self) -> None:
        with capture_logs() as logs:
            codec = PropertyCodec()
            codec.deserialize(Counter(), 'i009amount=43' + _checksum('amount=42'))
        warnings = [log for log in logs if log['log_level'] == 'warning']
        self.assertEqual(len(warnings), 1)
        self.assertEqual(warnings[0]['event'], 'document rejected, object left unchanged')
        self.assertEqual(warnings[0]['type'], 'Counter')
        self.assertIn('checksum mismatch', warnings[0]['reason'])

    def test_missing_property_is_logged(self) -> None:
        with capture_logs() as logs:
            codec = PropertyCodec()
            codec.deserialize(Counter(), '0000000000')
        events = [log['event'] for log in logs]
        self.assertIn('property not found, using default', events)
        self.assertIn('deserialized properties', events)


_ACCOUNT_TOKENS = [('i', 'amount=42'), ('s', 'owner=bob'), ('r', 'rate=0.5')]


def _change_char(char: str) -> str:
    if char.isdigit():
        return str((int(char) + 1) % 10)
    if char.isalpha():
        return char.swapcase()
    return '_'


@pytest.mark.parametrize('token_index, char_index', [
    (token_index, char_index)
    for token_index, (_, payload) in enumerate(_ACCOUNT_TOKENS)
    for char_index in range(len(payload))
])
def test_any_payload_change_is_detected(token_index: int, char_index: int) -> None:
    codec = PropertyCodec()
    document = codec.serialize(Account(amount=42, owner='bob', rate=0.5))
    assert document.startswith(''.join(f'{tag}{len(payload):03}{payload}' for tag, payload in _ACCOUNT_TOKENS))

    offset = sum(4 + len(payload) for _, payload in _ACCOUNT_TOKENS[:token_index]) + 4 + char_index
    char = document[offset]
    changed = document[:offset] + _change_char(char) + document[offset + 1:]

    account = Account(amount=1, owner='alice', rate=9.0)
    result = codec.deserialize(account, changed)
    assert isinstance(result.err(), DeserializationError)
    if char.isalnum():
        # the token still parses, only the checksum can tell
        assert isinstance(result.err(), ChecksumMismatchError)
    assert account.deserialize_calls == 0
    assert (account.amount, account.owner, account.rate) == (1, 'alice', 9.0)
