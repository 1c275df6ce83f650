# Copyright 2025 TIER IV, inc.
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

"""Authoring checks for shape documents.

The matching engine accepts some shapes whose meaning is ambiguous: two
wildcard keys in one mapping, array shapes with several template elements, or
optional markers without a name. None of these are errors for the engine, but
they usually are mistakes by the shape author. This linter reports them
without needing a subject.
"""

import sys
from dataclasses import dataclass
from typing import Any, List

from ..exceptions import DepthLimitError
from ..models.key_token import classify_key, is_malformed_optional, is_wildcard_key
from ..models.value_kind import ValueKind, type_tag
from .path_tracker import PathTracker


@dataclass(frozen=True)
class ShapeIssue:
    message: str
    path: str


def format_shape_issues(issues: List[ShapeIssue]) -> str:
    return "\n".join(f"  - {i.message} (path={i.path})" for i in issues)


def lint_shape(shape: Any, max_depth: int = 100) -> List[ShapeIssue]:
    """Report authoring problems in a shape tree.

    Args:
        shape: Decoded shape document
        max_depth: Nesting limit, guards against cyclic shapes

    Returns:
        List of ShapeIssue objects, in pre-order of the shape tree
    """
    path = PathTracker()
    if ValueKind.of(shape) is not ValueKind.MAPPING:
        return [ShapeIssue(message=f"Shape root must be a mapping/object, found {type_tag(shape)}", path=path.render())]

    issues: List[ShapeIssue] = []
    try:
        _lint_node(shape, path, issues, depth=0, max_depth=max_depth)
    except RecursionError as exc:
        raise DepthLimitError(
            f"Shape nesting exceeds the interpreter recursion limit ({sys.getrecursionlimit()}) "
            f"before reaching max_depth={max_depth}"
        ) from exc
    return issues


def _lint_node(node: Any, path: PathTracker, issues: List[ShapeIssue], *, depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise DepthLimitError(f"Shape nesting exceeds the maximum depth of {max_depth} at {path.render()}")

    kind = ValueKind.of(node)

    if kind is ValueKind.MAPPING:
        wildcard_keys = [key for key in node if is_wildcard_key(key)]
        if len(wildcard_keys) > 1:
            listed = ", ".join(repr(key) for key in wildcard_keys)
            issues.append(
                ShapeIssue(
                    message=f"Mapping has {len(wildcard_keys)} wildcard keys ({listed}); only one is allowed per level",
                    path=path.render(),
                )
            )

        for raw_key, value in node.items():
            if is_malformed_optional(raw_key):
                issues.append(
                    ShapeIssue(
                        message=f"Optional marker {raw_key!r} has no key name; it is matched as an exact key",
                        path=path.render(),
                    )
                )
            with path.descend(classify_key(raw_key).canonical_name):
                _lint_node(value, path, issues, depth=depth + 1, max_depth=max_depth)

    elif kind is ValueKind.SEQUENCE:
        if len(node) > 1:
            issues.append(
                ShapeIssue(
                    message=f"Array shape has {len(node)} template elements; only the first is used",
                    path=path.render(),
                )
            )
        if node:
            _lint_node(node[0], path, issues, depth=depth + 1, max_depth=max_depth)
