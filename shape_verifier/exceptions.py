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

"""Custom exceptions for the shape verifier.

Mismatches between a shape and a subject are never raised; they are recorded
in a :class:`~shape_verifier.matcher.report.Report`. The exceptions below
signal contract violations by the caller or failures of the collaborators
around the matching engine.
"""


class ShapeVerifierError(Exception):
    """Base exception for shape-verifier related errors."""
    pass


class ShapeDefinitionError(ShapeVerifierError):
    """Exception raised when a shape document is not usable as a shape."""
    pass


class DepthLimitError(ShapeVerifierError):
    """Exception raised when shape or subject nesting exceeds the depth limit."""
    pass


class DocumentLoadError(ShapeVerifierError):
    """Exception raised when a JSON/YAML document cannot be read or decoded."""
    pass


class ManifestError(DocumentLoadError):
    """Exception raised when a batch manifest is malformed."""
    pass
