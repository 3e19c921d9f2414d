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

"""
Property-bag text codec.

Objects declare named int, float and str properties, the codec writes them as a single run-length-encoded string
closed by a checksum, and reads them back, leaving the object untouched when the string was corrupted.
"""

from propcodec.codec import PropertyCodec
from propcodec.exception import (
    ChecksumMismatchError,
    DeserializationError,
    InvalidPropertyNameError,
    MalformedDocumentError,
    NameTooLongError,
    PayloadTooLongError,
    PropertyCodecError,
    PropertyEncodingError,
    UnencodableTextError,
    UnsupportedPropertyTypeError,
)
from propcodec.reader import PropertyReader, PropertyStore
from propcodec.serializable import PropertySerializable
from propcodec.types import Property, PropertyType, PropertyValue
from propcodec.version import __version__
from propcodec.writer import PropertyWriter

__all__ = [
    'PropertyCodec',
    'PropertySerializable',
    'PropertyReader',
    'PropertyStore',
    'PropertyWriter',
    'Property',
    'PropertyType',
    'PropertyValue',
    'PropertyCodecError',
    'PropertyEncodingError',
    'NameTooLongError',
    'InvalidPropertyNameError',
    'PayloadTooLongError',
    'UnsupportedPropertyTypeError',
    'UnencodableTextError',
    'DeserializationError',
    'ChecksumMismatchError',
    'MalformedDocumentError',
    '__version__',
]
