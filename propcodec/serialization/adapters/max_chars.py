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

from typing import TypeVar

from typing_extensions import override

from propcodec.serialization.deserializer import Deserializer
from propcodec.serialization.exceptions import SerializationError

from .generic_adapter import GenericDeserializerAdapter

D = TypeVar('D', bound=Deserializer)


class MaxCharsExceededError(SerializationError):
    """ This error is raised when the adapted deserializer reached its maximum characters read.

    After this exception is raised the adapted deserializer cannot be used anymore. Handlers of this exception are
    expected to either: bubble up the exception (or an equivalent exception), or return an error.

    The inner deserializer may still be usable, but the point where the adapter stopped reading leaves the rest of the
    data unusable, so it should be considered a failed deserialization overall.
    """
    pass


class MaxCharsDeserializer(GenericDeserializerAdapter[D]):
    """Deserializer adapter that refuses to read past a fixed number of characters.

    Unlike the inner deserializer, `is_empty()` is true once the limit is reached, even if the inner deserializer
    still has data (for instance a trailer that is meant to be read by someone else).
    """

    def __init__(self, deserializer: D, max_chars: int) -> None:
        super().__init__(deserializer)
        self._chars_left = max_chars

    def chars_left(self) -> int:
        return self._chars_left

    def _check_update_exceeds(self, read_size: int) -> None:
        self._chars_left -= read_size
        if self._chars_left < 0:
            raise MaxCharsExceededError

    def _check_peek(self, peek_size: int) -> None:
        if peek_size > self._chars_left:
            raise MaxCharsExceededError

    @override
    def is_empty(self) -> bool:
        return self._chars_left <= 0 or super().is_empty()

    @override
    def peek_char(self) -> str:
        self._check_peek(1)
        return super().peek_char()

    @override
    def peek_text(self, n: int, *, exact: bool = True) -> str:
        if exact:
            self._check_peek(n)
        return super().peek_text(min(n, max(self._chars_left, 0)), exact=exact)

    @override
    def read_char(self) -> str:
        self._check_update_exceeds(1)
        return super().read_char()

    @override
    def read_text(self, n: int, *, exact: bool = True) -> str:
        if exact:
            self._check_update_exceeds(n)
            return super().read_text(n)
        result = super().read_text(min(n, max(self._chars_left, 0)), exact=False)
        self._chars_left -= len(result)
        return result

    @override
    def read_all(self) -> str:
        result = super().read_text(max(self._chars_left, 0), exact=False)
        self._chars_left -= len(result)
        return result
