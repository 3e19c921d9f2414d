# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from structlog import get_logger

from propcodec.conf.get_settings import get_global_settings
from propcodec.conf.settings import CodecSettings
from propcodec.exception import ChecksumMismatchError, DeserializationError, MalformedDocumentError
from propcodec.hashing import Checksum
from propcodec.reader import PropertyReader, PropertyStore
from propcodec.serialization import Deserializer, SerializationError
from propcodec.serialization.adapters import MaxCharsExceededError
from propcodec.serialization.encoding.checksum import decode_checksum, render_checksum
from propcodec.serialization.encoding.token import decode_token, split_payload
from propcodec.types import Property
from propcodec.utils.result import Err, Ok, Result, propagate_result
from propcodec.writer import PropertyWriter

if TYPE_CHECKING:
    from propcodec.serializable import PropertySerializable

logger = get_logger()


class PropertyCodec:
    """Encodes objects as property documents and decodes them back.

    The codec holds no per-call state: every call builds its own writer, store and checksum. A single codec can be
    shared by any number of objects and callers.

    Encoding problems are programming mistakes and raise. Decoding problems are data problems and never raise, they are
    returned as an `Err` and the target object is left untouched.
    """

    def __init__(self, *, settings: CodecSettings | None = None) -> None:
        self.log = logger.new()
        self._settings = settings if settings is not None else get_global_settings()

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    def create_writer(self) -> PropertyWriter:
        return PropertyWriter(self._settings)

    def serialize(self, instance: PropertySerializable) -> str:
        """Build the document of an object from the properties it writes in `serialize_properties()`."""
        writer = self.create_writer()
        instance.serialize_properties(writer)
        document = writer.finalize()
        self.log.debug('serialized properties', type=type(instance).__name__, properties=writer.token_count,
                       checksum=writer.checksum)
        return document

    def encode(self, properties: Iterable[Property]) -> str:
        """Build a document from an explicit list of properties, in the given order."""
        writer = self.create_writer()
        for prop in properties:
            writer.add(prop)
        return writer.finalize()

    def deserialize(self, instance: PropertySerializable, document: str) -> Result[PropertyStore, DeserializationError]:
        """Load a document into an object through its `deserialize_properties()`.

        The object is only called when the whole document is valid. Otherwise it is not touched at all and the error
        is returned instead of raised.
        """
        result = self.decode(document)
        match result:
            case Ok(store):
                instance.deserialize_properties(PropertyReader(store))
                self.log.debug('deserialized properties', type=type(instance).__name__, properties=len(store))
            case Err(error):
                self.log.warning('document rejected, object left unchanged', type=type(instance).__name__,
                                 reason=str(error))
        return result

    @propagate_result
    def decode(self, document: str) -> Result[PropertyStore, DeserializationError]:
        """Decode a document into a store of values, checking its checksum."""
        store = PropertyStore()
        checksum = Checksum()
        claimed = self._scan(document, store, checksum).unwrap_or_propagate()
        expected = render_checksum(checksum.value, width=self._settings.CHECKSUM_WIDTH)
        if claimed != expected:
            return Err(ChecksumMismatchError(claimed=claimed, expected=expected))
        return Ok(store)

    def _scan(self, document: str, store: PropertyStore, checksum: Checksum) -> Result[str, MalformedDocumentError]:
        """Decode every token into the store and return the checksum text found at the end of the document."""
        checksum_width = self._settings.CHECKSUM_WIDTH
        if len(document) < checksum_width:
            return Err(MalformedDocumentError(
                f'document has {len(document)} characters, at least {checksum_width} are needed'
            ))

        deserializer = Deserializer.build_text_deserializer(document)
        try:
            # the last characters are the checksum, tokens cannot reach into them
            with deserializer.with_max_chars(len(document) - checksum_width) as tokens:
                while not tokens.is_empty():
                    type_, payload = decode_token(tokens, length_width=self._settings.LENGTH_FIELD_WIDTH)
                    checksum.update(payload)
                    name, value_text = split_payload(payload, separator=self._settings.NAME_SEPARATOR)
                    store.put(type_, name, type_.parse_value(value_text))
            claimed = decode_checksum(deserializer, width=checksum_width)
            deserializer.finalize()
        except MaxCharsExceededError as e:
            return Err(MalformedDocumentError('token overlaps the checksum field'), e)
        except (SerializationError, ValueError) as e:
            return Err(MalformedDocumentError(f'malformed document: {e}'), e)
        return Ok(claimed)
