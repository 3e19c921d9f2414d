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


class PropertyCodecError(Exception):
    """Base class for exceptions in propcodec."""
    pass


class PropertyEncodingError(PropertyCodecError):
    """Raised when a property cannot be written, these always indicate a programming mistake."""
    pass


class NameTooLongError(PropertyEncodingError):
    """The property name has more characters than the format allows."""


class InvalidPropertyNameError(PropertyEncodingError):
    """The property name is empty or contains the name/value separator."""


class PayloadTooLongError(PropertyEncodingError):
    """The `name=value` text does not fit in the token length field."""


class UnsupportedPropertyTypeError(PropertyEncodingError, TypeError):
    """The value is not an int, float or str, or does not match the requested property type."""


class UnencodableTextError(PropertyEncodingError):
    """The name or the string value holds characters that have no UTF-8 encoding, such as lone surrogates."""


class DeserializationError(PropertyCodecError):
    """Base class for data errors found while decoding a document.

    These are never raised by the codec, they are returned inside an `Err` so callers can tell "corrupted input" apart
    from "nothing to load" without the deserialization itself failing loudly.
    """
    pass


class ChecksumMismatchError(DeserializationError):
    """The checksum stored in the document differs from the one computed from its tokens."""

    def __init__(self, claimed: str, expected: str) -> None:
        super().__init__(f'checksum mismatch: document has {claimed!r}, computed {expected!r}')
        self.claimed = claimed
        self.expected = expected


class MalformedDocumentError(DeserializationError):
    """The document could not be tokenized: truncated, bad length field, unknown tag or unparseable value."""
