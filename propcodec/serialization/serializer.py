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
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .text_serializer import TextSerializer


class Serializer(ABC):
    def finalize(self) -> str:
        """Get the resulting text, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_char(self, data: str) -> None:
        """Write a single character."""
        raise NotImplementedError

    @abstractmethod
    def write_text(self, data: str) -> None:
        # XXX: it is recommended that implementors of Serializer specialize this implementation
        for char in data:
            self.write_char(char)

    @staticmethod
    def build_text_serializer() -> TextSerializer:
        from .text_serializer import TextSerializer
        return TextSerializer()
