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
from typing import Optional

from propcodec.codec import PropertyCodec
from propcodec.reader import PropertyReader
from propcodec.writer import PropertyWriter


class PropertySerializable(ABC):
    """Base class for objects that are saved as a property document.

    Subclasses write each field that must survive a round-trip in `serialize_properties()` and read them back in
    `deserialize_properties()`, using the same names on both sides:

        class Account(PropertySerializable):
            def __init__(self) -> None:
                self.amount = 0

            def serialize_properties(self, writer: PropertyWriter) -> None:
                writer.add_property('amount', self.amount)

            def deserialize_properties(self, reader: PropertyReader) -> None:
                self.amount = reader.get_int_property('amount')

    Each hook is called exactly once per `serialize()`/`deserialize()` call.
    """
    __slots__ = ()

    @abstractmethod
    def serialize_properties(self, writer: PropertyWriter) -> None:
        raise NotImplementedError

    @abstractmethod
    def deserialize_properties(self, reader: PropertyReader) -> None:
        raise NotImplementedError

    def serialize(self, *, codec: Optional[PropertyCodec] = None) -> str:
        if codec is None:
            codec = PropertyCodec()
        return codec.serialize(self)

    def deserialize(self, document: str, *, codec: Optional[PropertyCodec] = None) -> bool:
        """Load the document into this object, returns False and changes nothing if the document is not valid."""
        if codec is None:
            codec = PropertyCodec()
        return codec.deserialize(self, document).is_ok()
