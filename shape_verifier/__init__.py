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

"""Structural verification of decoded JSON/YAML documents against shapes.

A shape is a document of the same vocabulary as the data it describes::

    >>> from shape_verifier import verify
    >>> verify({"users": [{"id": None}]}, {"users": [{"id": 1}]}).ok
    True
"""

__version__ = "0.1.0"

from .exceptions import (
    DepthLimitError,
    DocumentLoadError,
    ManifestError,
    ShapeDefinitionError,
    ShapeVerifierError,
)
from .config import VerifierConfig, verifier_config
from .models.key_token import KeyKind, KeyToken, classify_key
from .models.value_kind import ValueKind, type_tag
from .matcher import (
    Issue,
    IssueKind,
    PathTracker,
    Report,
    ReportStatus,
    ShapeIssue,
    ShapeMatcher,
    lint_shape,
    verify,
)

__all__ = [
    "DepthLimitError",
    "DocumentLoadError",
    "ManifestError",
    "ShapeDefinitionError",
    "ShapeVerifierError",
    "VerifierConfig",
    "verifier_config",
    "KeyKind",
    "KeyToken",
    "classify_key",
    "ValueKind",
    "type_tag",
    "Issue",
    "IssueKind",
    "PathTracker",
    "Report",
    "ReportStatus",
    "ShapeIssue",
    "ShapeMatcher",
    "lint_shape",
    "verify",
]
