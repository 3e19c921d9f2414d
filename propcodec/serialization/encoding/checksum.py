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
This module implements the checksum field that closes every document.

The checksum is rendered as decimal text, cut down to its first `width` characters when longer and left-padded with
zeros when shorter. Cutting is lossy: two checksums that only differ after the first `width` digits render the same.

>>> render_checksum(95157, width=10)
'0000095157'
>>> render_checksum(12345678901234, width=10)
'1234567890'

>>> se = Serializer.build_text_serializer()
>>> encode_checksum(se, 95157, width=10)
>>> se.finalize()
'0000095157'

Decoding does not interpret the field, the text is returned as is so it can be compared with a rendered checksum:

>>> de = Deserializer.build_text_deserializer('0000095157')
>>> decode_checksum(de, width=10)
'0000095157'
>>> de.finalize()
"""

from propcodec.serialization import Deserializer, Serializer


def render_checksum(checksum: int, *, width: int) -> str:
    return str(checksum)[:width].rjust(width, '0')


def encode_checksum(serializer: Serializer, checksum: int, *, width: int) -> None:
    serializer.write_text(render_checksum(checksum, width=width))


def decode_checksum(deserializer: Deserializer, *, width: int) -> str:
    return deserializer.read_text(width)
