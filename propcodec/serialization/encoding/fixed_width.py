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

"""
This module implements unsigned integers written as zero-padded decimal text of a fixed width.

It is used for the length field of every token. The width is a parameter, values that do not fit are refused instead
of being truncated, since a truncated length would desynchronize the whole document.

>>> se = Serializer.build_text_serializer()
>>> encode_fixed_width(se, 9, width=3)  # writes 009
>>> encode_fixed_width(se, 999, width=3)  # writes 999
>>> encode_fixed_width(se, 0, width=3)  # writes 000
>>> se.finalize()
'009999000'

>>> se = Serializer.build_text_serializer()
>>> try:
...     encode_fixed_width(se, 1000, width=3)
... except TooLongError as e:
...     print(*e.args)
1000 does not fit in 3 digits

>>> de = Deserializer.build_text_deserializer('009999000test')
>>> decode_fixed_width(de, width=3)  # reads 009
9
>>> decode_fixed_width(de, width=3)  # reads 999
999
>>> decode_fixed_width(de, width=3)  # reads 000
0
>>> de.read_all()
'test'

>>> de = Deserializer.build_text_deserializer('0x9')
>>> try:
...     decode_fixed_width(de, width=3)
... except BadDataError as e:
...     print(*e.args)
'0x9' is not a valid 3-digit decimal field
"""

from propcodec.serialization import BadDataError, Deserializer, Serializer, TooLongError

_DIGITS = frozenset('0123456789')


def encode_fixed_width(serializer: Serializer, value: int, *, width: int) -> None:
    """ Encodes a non-negative integer as exactly `width` decimal digits.

    This module's docstring has more details and examples.
    """
    assert isinstance(value, int)
    if value < 0:
        raise ValueError('cannot encode value <0 as a fixed-width field')
    text = str(value)
    if len(text) > width:
        raise TooLongError(f'{value} does not fit in {width} digits')
    serializer.write_text(text.rjust(width, '0'))


def decode_fixed_width(deserializer: Deserializer, *, width: int) -> int:
    """ Decodes exactly `width` decimal digits as a non-negative integer.

    This module's docstring has more details and examples.
    """
    text = deserializer.read_text(width)
    if not text or not _DIGITS.issuperset(text):
        raise BadDataError(f'{text!r} is not a valid {width}-digit decimal field')
    return int(text)
