#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

r"""
A token holds a single property.

Layout: [tag: 1 char][length: zero-padded decimal, fixed width][payload: `length` chars]

The payload is the property name, the separator and the text of the value. Only the first separator matters, so
string values are free to contain it.

>>> se = Serializer.build_text_serializer()
>>> encode_token(se, PropertyType.INT, 'amount=42', length_width=3)  # writes i009amount=42
>>> encode_token(se, PropertyType.STRING, 'title=a=b', length_width=3)  # writes s009title=a=b
>>> se.finalize()
'i009amount=42s009title=a=b'

>>> de = Deserializer.build_text_deserializer('i009amount=42s009title=a=b')
>>> decode_token(de, length_width=3)  # reads i009amount=42
(<PropertyType.INT: 'i'>, 'amount=42')
>>> decode_token(de, length_width=3)  # reads s009title=a=b
(<PropertyType.STRING: 's'>, 'title=a=b')
>>> de.finalize()

>>> split_payload('title=a=b', separator='=')
('title', 'a=b')

>>> de = Deserializer.build_text_deserializer('x003a=1')
>>> try:
...     decode_token(de, length_width=3)
... except BadDataError as e:
...     print(*e.args)
'x' is not a valid type tag
"""

from propcodec.serialization import BadDataError, Deserializer, Serializer
from propcodec.serialization.encoding.fixed_width import decode_fixed_width, encode_fixed_width
from propcodec.types import PropertyType


def build_payload(name: str, value_text: str, *, separator: str) -> str:
    return f'{name}{separator}{value_text}'


def split_payload(payload: str, *, separator: str) -> tuple[str, str]:
    """ Splits a payload at the first separator into name and value text.
    """
    name, found, value_text = payload.partition(separator)
    if not found:
        raise BadDataError(f'payload {payload!r} has no name/value separator')
    return name, value_text


def encode_token(serializer: Serializer, type_: PropertyType, payload: str, *, length_width: int) -> None:
    """ Encodes a single token: tag, length field and payload.

    This module's docstring has more details and examples.
    """
    serializer.write_char(type_.value)
    encode_fixed_width(serializer, len(payload), width=length_width)
    serializer.write_text(payload)


def decode_token(deserializer: Deserializer, *, length_width: int) -> tuple[PropertyType, str]:
    """ Decodes a single token and returns its type and payload.

    This module's docstring has more details and examples.
    """
    tag = deserializer.read_char()
    try:
        type_ = PropertyType(tag)
    except ValueError:
        raise BadDataError(f'{tag!r} is not a valid type tag') from None
    length = decode_fixed_width(deserializer, width=length_width)
    payload = deserializer.read_text(length)
    return type_, payload
