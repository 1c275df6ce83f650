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

"""Recursive matching of a subject tree against a shape tree.

The walk follows the shape: for every key of a shape mapping the subject is
checked for the key, then the value found there is checked against the shape
value. What is checked depends on the kind of the *shape* value:

* array - the subject value must be an array. A non-empty array shape uses its
  first element as a template; the subject array must then be non-empty and
  every element is checked against the template.
* object - the subject value must be an object. A non-empty object shape is
  matched recursively; an empty one only checks the type.
* null or scalar - presence is enough.

Errors never stop the walk. Every problem is appended to the Report, in
pre-order of the shape tree.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Iterable, Optional, Tuple

from ..config import DEFAULT_MAX_DEPTH, VerifierConfig, verifier_config
from ..exceptions import DepthLimitError, ShapeDefinitionError
from ..models.key_token import KeyToken, classify_key
from ..models.value_kind import ValueKind, is_mapping, is_sequence, type_tag
from .path_tracker import PathTracker
from .report import IssueKind, Report
from .shape_linter import format_shape_issues, lint_shape

logger = logging.getLogger(__name__)


class ShapeMatcher:
    """Verifies subjects against shapes.

    Holds settings only; every call to :meth:`verify` allocates its own Report
    and PathTracker, so one matcher can be shared between threads.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, strict_shapes: bool = False):
        """Initialize the matcher.

        Args:
            max_depth: Maximum recursion depth before DepthLimitError is raised
            strict_shapes: Reject ambiguous shapes (see shape_linter) before matching
        """
        if max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self.max_depth = max_depth
        self.strict_shapes = strict_shapes

    @classmethod
    def from_config(cls, config: VerifierConfig) -> "ShapeMatcher":
        return cls(max_depth=config.max_depth, strict_shapes=config.strict_shapes)

    def verify(self, shape: Any, subject: Any) -> Report:
        """Verify *subject* against *shape* and return the diagnostic report.

        Raises:
            ShapeDefinitionError: If the shape root is not a mapping, or strict
                mode is on and the shape has authoring problems
            DepthLimitError: If nesting exceeds ``max_depth``
        """
        if not is_mapping(shape):
            raise ShapeDefinitionError(f"Shape root must be a mapping/object, found {type_tag(shape)}")

        if self.strict_shapes:
            issues = lint_shape(shape, max_depth=self.max_depth)
            if issues:
                raise ShapeDefinitionError(f"Shape definition is ambiguous:\n{format_shape_issues(issues)}")

        report = Report()
        path = PathTracker()
        logger.debug(f"Verifying subject of kind '{type_tag(subject)}' against shape with {len(shape)} key(s)")
        try:
            self.verify_into(shape, subject, report, path)
        except RecursionError as exc:
            # max_depth above what the interpreter stack allows
            raise DepthLimitError(
                f"Nesting exceeds the interpreter recursion limit ({sys.getrecursionlimit()}) "
                f"before reaching max_depth={self.max_depth}"
            ) from exc
        logger.debug(f"Verification finished: {report.status.value} ({len(report.messages)} error(s))")
        return report

    def verify_into(self, shape: Any, subject: Any, report: Report, path: PathTracker, depth: int = 0) -> None:
        """Match *shape* against *subject*, appending errors to *report*.

        This is the recursive step; callers normally use :meth:`verify`.
        A non-mapping shape is checked like a shape value (array type check,
        or nothing for null/scalar).
        """
        if depth > self.max_depth:
            raise DepthLimitError(f"Nesting exceeds the maximum depth of {self.max_depth} at {path.render()}")

        if not is_mapping(shape):
            self._check_value(shape, subject, report, path, depth)
            return

        for raw_key, shape_value in shape.items():
            token = classify_key(raw_key)

            if token.is_wildcard:
                satisfied = _wildcard_satisfied(subject)
            else:
                satisfied = _has_key(subject, token, raw_key)

            if not satisfied:
                if token.is_optional:
                    continue
                report.add_error(
                    IssueKind.MISSING_REQUIRED_KEY,
                    f"Missing required key '{token.canonical_name}' at {path.render()}",
                    path.render(),
                )
                continue

            with path.descend(token.canonical_name):
                if token.is_wildcard:
                    self._check_wildcard(shape_value, subject, report, path, depth)
                else:
                    subject_value = _lookup(subject, token, raw_key)
                    self._check_value(shape_value, subject_value, report, path, depth)

    def _check_value(self, shape_value: Any, subject_value: Any, report: Report, path: PathTracker, depth: int) -> None:
        kind = ValueKind.of(shape_value)
        if kind is ValueKind.SEQUENCE:
            self._check_array(shape_value, subject_value, report, path, depth)
        elif kind is ValueKind.MAPPING:
            self._check_object(shape_value, subject_value, report, path, depth)
        elif kind in (ValueKind.NULL, ValueKind.SCALAR):
            # any value
            return

    def _check_array(self, shape_value: Any, subject_value: Any, report: Report, path: PathTracker, depth: int) -> None:
        if not is_sequence(subject_value):
            report.add_error(
                IssueKind.ARRAY_TYPE_MISMATCH,
                f"Value at {path.render()} should be array (expected: array, found: {type_tag(subject_value)})",
                path.render(),
            )
            return

        if not shape_value:
            return

        if len(shape_value) > 1:
            logger.debug(
                f"Array shape at {path.render()} has {len(shape_value)} elements; only the first is used as template"
            )

        if not subject_value:
            report.add_error(
                IssueKind.EMPTY_ARRAY,
                f"Expected data in array at {path.render()}; found nothing",
                path.render(),
            )
            return

        template = shape_value[0]
        for element in subject_value:
            self.verify_into(template, element, report, path, depth + 1)

    def _check_object(self, shape_value: Any, subject_value: Any, report: Report, path: PathTracker, depth: int) -> None:
        if not is_mapping(subject_value):
            report.add_error(
                IssueKind.OBJECT_TYPE_MISMATCH,
                f"Value at {path.render()} should be object (expected: object, found: {type_tag(subject_value)})",
                path.render(),
            )
            return

        if not shape_value:
            return

        self.verify_into(shape_value, subject_value, report, path, depth + 1)

    def _check_wildcard(self, shape_value: Any, subject: Any, report: Report, path: PathTracker, depth: int) -> None:
        kind = ValueKind.of(shape_value)
        if kind in (ValueKind.NULL, ValueKind.SCALAR):
            return

        for member_key, member_value in _members(subject):
            path.replace_top(member_key)
            if kind is ValueKind.MAPPING:
                self.verify_into(shape_value, member_value, report, path, depth + 1)
            else:
                self._check_array(shape_value, member_value, report, path, depth)


def _wildcard_satisfied(subject: Any) -> bool:
    kind = ValueKind.of(subject)
    if kind is ValueKind.MAPPING:
        return len(subject) > 0
    return kind is ValueKind.SEQUENCE


def _has_key(subject: Any, token: KeyToken, raw_key: Any) -> bool:
    if not is_mapping(subject):
        return False
    if token.canonical_name in subject:
        return True
    return not isinstance(raw_key, str) and raw_key in subject


def _lookup(subject: Any, token: KeyToken, raw_key: Any) -> Any:
    if token.canonical_name in subject:
        return subject[token.canonical_name]
    return subject[raw_key]


def _members(subject: Any) -> Iterable[Tuple[str, Any]]:
    if is_mapping(subject):
        return ((str(key), value) for key, value in subject.items())
    return ((str(index), value) for index, value in enumerate(subject))


def verify(shape: Any, subject: Any, *, config: Optional[VerifierConfig] = None) -> Report:
    """Verify *subject* against *shape* with a fresh Report and path.

    Args:
        shape: Decoded shape document; the root must be a mapping
        subject: Decoded document to check
        config: Settings to use instead of the environment defaults

    Returns:
        Report with status and messages
    """
    return ShapeMatcher.from_config(config or verifier_config).verify(shape, subject)
