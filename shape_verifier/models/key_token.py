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

"""Key token grammar for shape mappings.

A shape key encodes how it is matched against the subject:

* ``[*:key]`` - wildcard, every key of the subject mapping is checked against
  the same sub-shape. Surrounding whitespace is ignored.
* ``[opt:key:NAME]`` - optional key ``NAME``; absence is not an error, presence
  is validated like an exact key.
* anything else - exact key, looked up verbatim.

Malformed markers (``[opt:key:]``, a missing closing bracket, ...) are not
errors; they fall back to exact keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


WILDCARD_MARKER = "[*:key]"
OPTIONAL_PREFIX = "[opt:key:"
OPTIONAL_SUFFIX = "]"


class KeyKind(Enum):
    EXACT = "exact"
    WILDCARD = "wildcard"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class KeyToken:
    """Classified shape key.

    ``canonical_name`` is the key looked up in the subject for EXACT and
    OPTIONAL tokens. For WILDCARD tokens it is the raw marker and is only used
    in diagnostics.
    """

    canonical_name: str
    kind: KeyKind

    @property
    def is_wildcard(self) -> bool:
        return self.kind is KeyKind.WILDCARD

    @property
    def is_optional(self) -> bool:
        return self.kind is KeyKind.OPTIONAL


def is_wildcard_key(raw_key: Any) -> bool:
    return isinstance(raw_key, str) and raw_key.strip() == WILDCARD_MARKER.strip()


def extract_optional_name(raw_key: Any) -> Optional[str]:
    """Return the inner name of an optional marker, or None if *raw_key* is not one."""
    if not isinstance(raw_key, str):
        return None

    text = raw_key.strip()
    if not text.startswith(OPTIONAL_PREFIX) or not text.endswith(OPTIONAL_SUFFIX):
        return None

    inner = text[len(OPTIONAL_PREFIX):len(text) - len(OPTIONAL_SUFFIX)]
    if not inner:
        return None
    return inner


def is_malformed_optional(raw_key: Any) -> bool:
    """True for keys that look like optional markers but carry no usable name."""
    if not isinstance(raw_key, str):
        return False
    text = raw_key.strip()
    return text.startswith(OPTIONAL_PREFIX) and extract_optional_name(raw_key) is None


def classify_key(raw_key: Any) -> KeyToken:
    """Classify a raw shape-mapping key into a :class:`KeyToken`."""
    if is_wildcard_key(raw_key):
        return KeyToken(canonical_name=raw_key, kind=KeyKind.WILDCARD)

    optional_name = extract_optional_name(raw_key)
    if optional_name is not None:
        return KeyToken(canonical_name=optional_name, kind=KeyKind.OPTIONAL)

    # YAML allows non-string keys (ints, bools); match them by their text form
    name = raw_key if isinstance(raw_key, str) else str(raw_key)
    return KeyToken(canonical_name=name, kind=KeyKind.EXACT)
