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

"""JSON/YAML document decoder with optional caching.

Produces the plain value trees (dict, list, scalars, None) consumed by the
matching engine.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


FORMAT_JSON = 'json'
FORMAT_YAML = 'yaml'

_SUFFIX_FORMATS = {
    '.json': FORMAT_JSON,
    '.yaml': FORMAT_YAML,
    '.yml': FORMAT_YAML,
}


def detect_format(path: Path) -> str:
    """Guess the document format from the file suffix.

    Unknown suffixes are read as YAML, which also accepts JSON.
    """
    return _SUFFIX_FORMATS.get(path.suffix.lower(), FORMAT_YAML)


class DocumentParser:
    """Document parser with caching."""

    def __init__(self, cache_enabled: bool = False):
        """Initialize document parser.

        Args:
            cache_enabled: Whether to keep decoded documents keyed by path.
        """
        self.cache_enabled = cache_enabled
        self._cache: Dict[Path, Any] = {}

    def load(self, file_path: Union[str, Path], fmt: Optional[str] = None) -> Any:
        """Load a JSON or YAML document.

        Args:
            file_path: Path to the document
            fmt: 'json' or 'yaml'; detected from the suffix when omitted

        Returns:
            Decoded value tree

        Raises:
            DocumentLoadError: If the file cannot be read or decoded
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentLoadError(f"Document not found: {path}")

        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading document from cache: {path}")
            return self._cache[path]

        try:
            content = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc

        logger.debug(f"Loading document: {path}")
        try:
            data = self.load_from_string(content, fmt or detect_format(path))
        except DocumentLoadError as exc:
            raise DocumentLoadError(f"Failed to parse document {path}: {exc}") from exc

        if self.cache_enabled:
            self._cache[path] = data

        return data

    def load_from_string(self, content: str, fmt: str = FORMAT_YAML) -> Any:
        """Decode document content.

        Args:
            content: JSON or YAML text
            fmt: 'json' or 'yaml'

        Returns:
            Decoded value tree; an empty YAML document decodes to {}

        Raises:
            DocumentLoadError: If content cannot be parsed
        """
        if fmt == FORMAT_JSON:
            try:
                return json.loads(content)
            except json.JSONDecodeError as exc:
                raise DocumentLoadError(f"Invalid JSON: {exc}") from exc

        if fmt == FORMAT_YAML:
            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError as exc:
                raise DocumentLoadError(f"Invalid YAML: {exc}") from exc
            return {} if data is None else data

        raise DocumentLoadError(f"Unsupported document format: '{fmt}'")

    def clear_cache(self):
        """Clear the document cache."""
        self._cache.clear()
        logger.debug("Document cache cleared")
