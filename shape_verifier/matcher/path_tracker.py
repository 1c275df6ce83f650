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

"""Breadcrumb of traversed keys, rendered as a JSON-pointer-like path."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List


ROOT_PATH = "/"


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


class PathTracker:
    """Mutable stack of path segments owned by a single verification call."""

    def __init__(self):
        self._segments: List[str] = []

    def push(self, segment: str) -> None:
        self._segments.append(str(segment))

    def pop(self) -> str:
        return self._segments.pop()

    def replace_top(self, segment: str) -> None:
        if not self._segments:
            raise IndexError("replace_top on an empty path")
        self._segments[-1] = str(segment)

    @contextmanager
    def descend(self, segment: str) -> Iterator["PathTracker"]:
        """Push *segment* for the duration of the block."""
        depth = len(self._segments)
        self.push(segment)
        try:
            yield self
        finally:
            # replace_top may have changed the segment; only the length matters
            del self._segments[depth:]

    @property
    def segments(self) -> List[str]:
        return list(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def render(self) -> str:
        if not self._segments:
            return ROOT_PATH
        return "".join(f"/{_jp_escape(segment)}" for segment in self._segments)

    def __str__(self) -> str:
        return self.render()
