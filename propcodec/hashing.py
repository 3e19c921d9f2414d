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

"""
Deterministic string hash used by the document checksum.

Python's builtin `hash()` is salted per process, so a document written by one process could never be checked by
another. Instead this module uses a 32-bit polynomial hash over the UTF-8 encoding of the text:

    h = (31 * h + byte) mod 2**32

>>> hash_text('')
0
>>> hash_text('a=1')
95157

The checksum of a document is the plain sum of the hashes of its payloads. Since addition is commutative the
checksum does not depend on the order of the tokens:

>>> c1, c2 = Checksum(), Checksum()
>>> for payload in ['a=1', 'b=2']:
...     c1.update(payload)
>>> for payload in ['b=2', 'a=1']:
...     c2.update(payload)
>>> c1.value == c2.value == hash_text('a=1') + hash_text('b=2')
True
"""

HASH_MODULUS = 2 ** 32


def hash_text(text: str) -> int:
    h = 0
    for byte in text.encode('utf-8'):
        h = (h * 31 + byte) % HASH_MODULUS
    return h


class Checksum:
    """Running sum of payload hashes, scoped to a single encode or decode call."""

    __slots__ = ('_value',)

    def __init__(self) -> None:
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def update(self, payload: str) -> None:
        self.add(hash_text(payload))

    def add(self, payload_hash: int) -> None:
        self._value += payload_hash
