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

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import OutOfDataError


class TextDeserializer(Deserializer):
    """Simple implementation of a Deserializer to parse values from a string.

    This implementation keeps the whole string and an offset that is advanced as the characters are read.
    """

    def __init__(self, data: str) -> None:
        self._data = data
        self._offset = 0

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise ValueError('trailing data')
        del self._data
        del self._offset

    @override
    def is_empty(self) -> bool:
        return self._offset >= len(self._data)

    def chars_left(self) -> int:
        return len(self._data) - self._offset

    @override
    def peek_char(self) -> str:
        if self.is_empty():
            raise OutOfDataError('not enough characters to read')
        return self._data[self._offset]

    @override
    def peek_text(self, n: int, *, exact: bool = True) -> str:
        if n < 0:
            raise ValueError('value cannot be negative')
        if exact and self.chars_left() < n:
            raise OutOfDataError('not enough characters to read')
        return self._data[self._offset:self._offset + n]

    @override
    def read_char(self) -> str:
        c = self.peek_char()
        self._offset += 1
        return c

    @override
    def read_text(self, n: int, *, exact: bool = True) -> str:
        text = self.peek_text(n, exact=exact)
        self._offset += len(text)
        return text

    @override
    def read_all(self) -> str:
        text = self._data[self._offset:]
        self._offset = len(self._data)
        return text
