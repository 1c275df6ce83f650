# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Value model shared by shape and subject trees.

Decoded JSON/YAML documents are plain Python objects. Every value falls into
exactly one of four kinds:

==========  ==================================  =========
Kind        Python values                       Tag
==========  ==================================  =========
NULL        ``None``                            ``null``
SCALAR      bool, int, float, str, anything     ``scalar``
            that is not a container
SEQUENCE    ``list``, ``tuple``                 ``array``
MAPPING     any ``collections.abc.Mapping``     ``object``
==========  ==================================  =========

The tags are stable and appear in diagnostic messages.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Closed set of value kinds; the enum value is the diagnostic tag."""

    NULL = "null"
    SCALAR = "scalar"
    SEQUENCE = "array"
    MAPPING = "object"

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        if value is None:
            return cls.NULL
        if isinstance(value, Mapping):
            return cls.MAPPING
        # str is not a sequence here
        if isinstance(value, (list, tuple)):
            return cls.SEQUENCE
        return cls.SCALAR


def type_tag(value: Any) -> str:
    """Return the stable diagnostic tag of *value*."""
    return ValueKind.of(value).tag


def is_mapping(value: Any) -> bool:
    return ValueKind.of(value) is ValueKind.MAPPING


def is_sequence(value: Any) -> bool:
    return ValueKind.of(value) is ValueKind.SEQUENCE
