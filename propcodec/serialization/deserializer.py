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

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator

from typing_extensions import Self

if TYPE_CHECKING:
    from .adapters import MaxCharsDeserializer
    from .text_deserializer import TextDeserializer


class Deserializer(ABC):
    def finalize(self) -> None:
        """Check that all characters were consumed, the deserializer cannot be used after this."""
        raise TypeError('this deserializer does not support finalization')

    @staticmethod
    def build_text_deserializer(data: str) -> TextDeserializer:
        from .text_deserializer import TextDeserializer
        return TextDeserializer(data)

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def peek_char(self) -> str:
        """Read a single character but don't consume from buffer."""
        raise NotImplementedError

    @abstractmethod
    def peek_text(self, n: int, *, exact: bool = True) -> str:
        """Read n characters but don't consume from buffer."""
        raise NotImplementedError

    @abstractmethod
    def read_char(self) -> str:
        """Read a single character."""
        raise NotImplementedError

    @abstractmethod
    def read_text(self, n: int, *, exact: bool = True) -> str:
        """Read n characters, when exact=True it errors if there isn't enough data"""
        # XXX: this is a blanket implementation that is an example of the behavior, this implementation has to be
        #      explicitly used if needed
        def iter_chars() -> Iterator[str]:
            for _ in range(n):
                if not exact and self.is_empty():
                    break
                yield self.read_char()
        return ''.join(iter_chars())

    @abstractmethod
    def read_all(self) -> str:
        """Read all characters until the reader is empty."""
        # XXX: it is recommended that implementors of Deserializer specialize this implementation
        def iter_chars() -> Iterator[str]:
            while not self.is_empty():
                yield self.read_char()
        return ''.join(iter_chars())

    def with_max_chars(self, max_chars: int) -> MaxCharsDeserializer[Self]:
        """Helper method to wrap the current deserializer with MaxCharsDeserializer."""
        from .adapters import MaxCharsDeserializer
        return MaxCharsDeserializer(self, max_chars)
