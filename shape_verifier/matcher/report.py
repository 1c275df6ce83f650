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

"""Diagnostic report produced by one verification run."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List


class ReportStatus(Enum):
    OK = "ok"
    FAILED = "failed"


class IssueKind(Enum):
    MISSING_REQUIRED_KEY = "missing_required_key"
    ARRAY_TYPE_MISMATCH = "array_type_mismatch"
    OBJECT_TYPE_MISMATCH = "object_type_mismatch"
    EMPTY_ARRAY = "empty_array"


@dataclass(frozen=True)
class Issue:
    kind: IssueKind
    message: str
    path: str

    def to_dict(self) -> Dict[str, str]:
        return {'kind': self.kind.value, 'message': self.message, 'path': self.path}


class Report:
    """Accumulated diagnostics for one shape/subject pair.

    Errors are only ever appended. ``status`` is derived from the message list,
    so it is FAILED exactly when at least one message was recorded.
    """

    def __init__(self):
        self.messages: List[str] = []
        self.issues: List[Issue] = []

    @property
    def status(self) -> ReportStatus:
        return ReportStatus.FAILED if self.messages else ReportStatus.OK

    @property
    def ok(self) -> bool:
        return self.status is ReportStatus.OK

    def add_error(self, kind: IssueKind, message: str, path: str) -> None:
        """Record an error and latch the report to FAILED.

        Args:
            kind: Error category
            message: Human-readable message, already containing the path
            path: Rendered location of the error
        """
        self.issues.append(Issue(kind=kind, message=message, path=path))
        self.messages.append(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status.value,
            'messages': list(self.messages),
            'issues': [issue.to_dict() for issue in self.issues],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Report):
            return NotImplemented
        return self.issues == other.issues

    def __repr__(self) -> str:
        return f"Report(status={self.status.value}, messages={self.messages!r})"
