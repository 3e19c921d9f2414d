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

from dataclasses import dataclass, field
from typing import Iterator, assert_never

from structlog import get_logger

from propcodec.types import Property, PropertyType, PropertyValue

logger = get_logger()


@dataclass(slots=True)
class PropertyStore:
    """Values decoded from a document, one mapping per property type.

    Each mapping is keyed by property name, so the same name may hold one value of each type at the same time.
    """

    ints: dict[str, int] = field(default_factory=dict)
    reals: dict[str, float] = field(default_factory=dict)
    strings: dict[str, str] = field(default_factory=dict)

    def put(self, type_: PropertyType, name: str, value: PropertyValue) -> None:
        match type_:
            case PropertyType.INT:
                assert isinstance(value, int)
                self.ints[name] = value
            case PropertyType.REAL:
                assert isinstance(value, float)
                self.reals[name] = value
            case PropertyType.STRING:
                assert isinstance(value, str)
                self.strings[name] = value
            case _:
                assert_never(type_)

    def __len__(self) -> int:
        return len(self.ints) + len(self.reals) + len(self.strings)

    def iter_properties(self) -> Iterator[Property]:
        for name, int_value in self.ints.items():
            yield Property(name, PropertyType.INT, int_value)
        for name, real_value in self.reals.items():
            yield Property(name, PropertyType.REAL, real_value)
        for name, str_value in self.strings.items():
            yield Property(name, PropertyType.STRING, str_value)


class PropertyReader:
    """Read access to the properties of a document, handed to `deserialize_properties()`.

    Looking up a name that is not in the document returns a default value (0, 0.0 or '') instead of failing, use the
    `has_*` methods to tell a missing property from a stored default.
    """

    def __init__(self, store: PropertyStore) -> None:
        self.log = logger.new()
        self._store = store

    def get_int_property(self, name: str) -> int:
        value = self._store.ints.get(name)
        if value is None:
            self._log_missing(name, PropertyType.INT)
            return 0
        return value

    def get_real_property(self, name: str) -> float:
        value = self._store.reals.get(name)
        if value is None:
            self._log_missing(name, PropertyType.REAL)
            return 0.0
        return value

    def get_string_property(self, name: str) -> str:
        value = self._store.strings.get(name)
        if value is None:
            self._log_missing(name, PropertyType.STRING)
            return ''
        return value

    def has_int_property(self, name: str) -> bool:
        return name in self._store.ints

    def has_real_property(self, name: str) -> bool:
        return name in self._store.reals

    def has_string_property(self, name: str) -> bool:
        return name in self._store.strings

    def _log_missing(self, name: str, type_: PropertyType) -> None:
        self.log.debug('property not found, using default', name=name, type=type_.name)
