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

from enum import Enum
from typing import NamedTuple, TypeAlias, assert_never

from propcodec.exception import PayloadTooLongError, UnsupportedPropertyTypeError

PropertyValue: TypeAlias = int | float | str


class PropertyType(Enum):
    """Type of a property, the value of each member is the tag that starts its token."""

    INT = 'i'
    REAL = 'r'
    STRING = 's'

    @classmethod
    def for_value(cls, value: PropertyValue) -> PropertyType:
        """Infer the property type from a Python value.

        >>> PropertyType.for_value(42)
        <PropertyType.INT: 'i'>
        >>> PropertyType.for_value(True)
        <PropertyType.INT: 'i'>
        >>> PropertyType.for_value(1.5)
        <PropertyType.REAL: 'r'>
        >>> PropertyType.for_value('foo')
        <PropertyType.STRING: 's'>
        """
        # bool is an int subclass, it is written as 0/1
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.REAL
        if isinstance(value, str):
            return cls.STRING
        raise UnsupportedPropertyTypeError(f'type not supported: {type(value).__name__}')

    def format_value(self, value: PropertyValue) -> str:
        """Render a value as the text that follows the separator in a payload.

        >>> PropertyType.INT.format_value(-42)
        '-42'
        >>> PropertyType.INT.format_value(True)
        '1'
        >>> PropertyType.REAL.format_value(0.1)
        '0.1'
        >>> PropertyType.REAL.format_value(3)
        '3.0'
        >>> PropertyType.STRING.format_value('a=b')
        'a=b'
        """
        match self:
            case PropertyType.INT:
                if not isinstance(value, int):
                    raise UnsupportedPropertyTypeError(f'expected int, got {type(value).__name__}')
                try:
                    return str(int(value))
                except ValueError as e:
                    # int to str conversion refuses values with too many digits
                    raise PayloadTooLongError('integer has too many digits') from e
            case PropertyType.REAL:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise UnsupportedPropertyTypeError(f'expected float, got {type(value).__name__}')
                try:
                    return repr(float(value))
                except OverflowError as e:
                    raise UnsupportedPropertyTypeError('integer is too large to be written as a float') from e
            case PropertyType.STRING:
                if not isinstance(value, str):
                    raise UnsupportedPropertyTypeError(f'expected str, got {type(value).__name__}')
                return value
            case _:
                assert_never(self)

    def parse_value(self, text: str) -> PropertyValue:
        """Parse the text that follows the separator in a payload, raises ValueError when it is not valid.

        >>> PropertyType.INT.parse_value('-42')
        -42
        >>> PropertyType.REAL.parse_value('0.1')
        0.1
        >>> PropertyType.STRING.parse_value('42')
        '42'
        """
        match self:
            case PropertyType.INT:
                return int(text)
            case PropertyType.REAL:
                return float(text)
            case PropertyType.STRING:
                return text
            case _:
                assert_never(self)


class Property(NamedTuple):
    name: str
    type: PropertyType
    value: PropertyValue

    @classmethod
    def from_value(cls, name: str, value: PropertyValue) -> Property:
        return cls(name, PropertyType.for_value(value), value)
