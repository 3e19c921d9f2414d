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

from types import TracebackType
from typing import Generic, TypeVar, Union

from typing_extensions import Self, override

from propcodec.serialization.deserializer import Deserializer

D = TypeVar('D', bound=Deserializer)


class GenericDeserializerAdapter(Deserializer, Generic[D]):
    inner: D

    def __init__(self, deserializer: D) -> None:
        self.inner = deserializer

    @override
    def finalize(self) -> None:
        return self.inner.finalize()

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def peek_char(self) -> str:
        return self.inner.peek_char()

    @override
    def peek_text(self, n: int, *, exact: bool = True) -> str:
        return self.inner.peek_text(n, exact=exact)

    @override
    def read_char(self) -> str:
        return self.inner.read_char()

    @override
    def read_text(self, n: int, *, exact: bool = True) -> str:
        return self.inner.read_text(n, exact=exact)

    @override
    def read_all(self) -> str:
        return self.inner.read_all()

    # allow using this adapter as a context manager:

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Union[type[BaseException], None],
        exc_value: Union[BaseException, None],
        traceback: Union[TracebackType, None],
    ) -> None:
        pass
