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

from pydantic import field_validator

from propcodec.utils import pydantic


class CodecSettings(pydantic.BaseModel):
    # Maximum number of characters in a property name
    MAX_NAME_LENGTH: int = 10

    # Number of decimal digits in the length field of each token
    LENGTH_FIELD_WIDTH: int = 3

    # Number of characters of the checksum field at the end of a document
    CHECKSUM_WIDTH: int = 10

    # Separates the property name from its value inside a payload
    NAME_SEPARATOR: str = '='

    @property
    def MAX_PAYLOAD_LENGTH(self) -> int:
        """Largest payload the length field can describe."""
        return 10 ** self.LENGTH_FIELD_WIDTH - 1

    @field_validator('MAX_NAME_LENGTH', 'LENGTH_FIELD_WIDTH', 'CHECKSUM_WIDTH')
    @classmethod
    def _validate_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError('must be a positive integer')
        return value

    @field_validator('NAME_SEPARATOR')
    @classmethod
    def _validate_separator(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError('must be a single character')
        return value
