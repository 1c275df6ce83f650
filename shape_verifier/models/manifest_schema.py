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

"""Batch manifest loading and JSON Schema validation."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

from ..exceptions import DocumentLoadError, ManifestError
from ..parsers.document_parser import DocumentParser


MANIFEST_SCHEMA_NAME = "manifest"

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


@dataclass(frozen=True)
class ManifestCheck:
    """One shape/subject pair listed in a manifest, with resolved paths."""
    name: str
    shape_path: Path
    subject_path: Path
    strict: Optional[bool] = None


def get_schema_path(schema_name: str) -> Path:
    schema_dir = Path(__file__).parent.parent / "schema"
    return schema_dir / f"{schema_name}.json"


def load_schema(schema_name: str = MANIFEST_SCHEMA_NAME) -> dict:
    """Load a bundled JSON Schema file.

    Raises:
        FileNotFoundError: If the schema file doesn't exist
        json.JSONDecodeError: If the schema file is invalid JSON
    """
    if schema_name in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[schema_name]

    schema_path = get_schema_path(schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found for '{schema_name}': {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    _SCHEMA_CACHE[schema_name] = schema
    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()


def _error_path(error: jsonschema.ValidationError) -> str:
    if not error.absolute_path:
        return "/"
    return "/" + "/".join(str(p) for p in error.absolute_path)


def validate_manifest_data(data: Any) -> List[str]:
    """Validate decoded manifest data and return one message per violation."""
    validator = jsonschema.Draft7Validator(load_schema(MANIFEST_SCHEMA_NAME))
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    return [f"{e.message} (path={_error_path(e)})" for e in errors]


def load_manifest(
    manifest_path: Union[str, Path],
    parser: Optional[DocumentParser] = None,
) -> List[ManifestCheck]:
    """Load a batch manifest and resolve its checks.

    Relative shape/subject paths are resolved against the manifest directory.

    Raises:
        ManifestError: If the manifest cannot be read or violates the schema
    """
    path = Path(manifest_path)
    parser = parser or DocumentParser()

    try:
        data = parser.load(path)
    except DocumentLoadError as exc:
        raise ManifestError(f"Failed to load manifest: {exc}") from exc

    problems = validate_manifest_data(data)
    if problems:
        details = "\n".join(f"  - {p}" for p in problems)
        raise ManifestError(f"Manifest validation failed for {path}:\n{details}")

    base_dir = path.parent
    checks: List[ManifestCheck] = []
    for entry in data["checks"]:
        shape_path = base_dir / entry["shape"]
        subject_path = base_dir / entry["subject"]
        checks.append(
            ManifestCheck(
                name=entry.get("name") or entry["subject"],
                shape_path=shape_path,
                subject_path=subject_path,
                strict=entry.get("strict"),
            )
        )
    return checks
