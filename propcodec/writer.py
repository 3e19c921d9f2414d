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

from structlog import get_logger

from propcodec.conf.settings import CodecSettings
from propcodec.exception import (
    InvalidPropertyNameError,
    NameTooLongError,
    PayloadTooLongError,
    PropertyEncodingError,
    UnencodableTextError,
)
from propcodec.hashing import Checksum, hash_text
from propcodec.serialization import Serializer
from propcodec.serialization.encoding.checksum import encode_checksum
from propcodec.serialization.encoding.token import build_payload, encode_token
from propcodec.types import Property, PropertyType, PropertyValue

logger = get_logger()


class PropertyWriter:
    """Writes the tokens of a single serialize call.

    A new writer is created by `PropertyCodec` for every call and handed to `serialize_properties()`. It owns the
    output and the running checksum, so nothing is shared between calls. All checks run before anything is written,
    a refused property leaves the writer exactly as it was.

    Adding the same name twice writes two tokens, when decoding the last one wins.
    """

    def __init__(self, settings: CodecSettings) -> None:
        self.log = logger.new()
        self._settings = settings
        self._serializer = Serializer.build_text_serializer()
        self._checksum = Checksum()
        self._token_count = 0
        self._finalized = False

    @property
    def checksum(self) -> int:
        """Sum of the hashes of the payloads written so far."""
        return self._checksum.value

    @property
    def token_count(self) -> int:
        return self._token_count

    def add_property(self, name: str, value: PropertyValue) -> None:
        """Add a property, its type is inferred from the Python type of the value."""
        self._write(name, PropertyType.for_value(value), value)

    def add_int_property(self, name: str, value: int) -> None:
        self._write(name, PropertyType.INT, value)

    def add_real_property(self, name: str, value: float) -> None:
        self._write(name, PropertyType.REAL, value)

    def add_string_property(self, name: str, value: str) -> None:
        self._write(name, PropertyType.STRING, value)

    def add(self, prop: Property) -> None:
        self._write(prop.name, prop.type, prop.value)

    def finalize(self) -> str:
        """Close the document with the checksum field and return it, the writer cannot be used after this."""
        self._check_not_finalized()
        encode_checksum(self._serializer, self._checksum.value, width=self._settings.CHECKSUM_WIDTH)
        self._finalized = True
        return self._serializer.finalize()

    def _check_not_finalized(self) -> None:
        if self._finalized:
            raise PropertyEncodingError('writer was already finalized')

    def _validate_name(self, name: str) -> None:
        max_length = self._settings.MAX_NAME_LENGTH
        if len(name) > max_length:
            raise NameTooLongError(f'property name {name!r} has {len(name)} characters, the maximum is {max_length}')
        if not name:
            raise InvalidPropertyNameError('property name cannot be empty')
        if self._settings.NAME_SEPARATOR in name:
            raise InvalidPropertyNameError(
                f'property name {name!r} cannot contain {self._settings.NAME_SEPARATOR!r}'
            )

    def _write(self, name: str, type_: PropertyType, value: PropertyValue) -> None:
        self._check_not_finalized()
        self._validate_name(name)
        payload = build_payload(name, type_.format_value(value), separator=self._settings.NAME_SEPARATOR)
        max_payload_length = self._settings.MAX_PAYLOAD_LENGTH
        if len(payload) > max_payload_length:
            raise PayloadTooLongError(
                f'property {name!r} takes {len(payload)} characters, the maximum is {max_payload_length}'
            )
        try:
            payload_hash = hash_text(payload)
        except UnicodeEncodeError as e:
            raise UnencodableTextError(f'property {name!r} cannot be encoded as UTF-8: {e.reason}') from e
        encode_token(self._serializer, type_, payload, length_width=self._settings.LENGTH_FIELD_WIDTH)
        self._checksum.add(payload_hash)
        self._token_count += 1
