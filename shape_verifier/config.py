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

"""Configuration management for the shape verifier."""

import os
import logging
from dataclasses import dataclass, replace

from .utils.logging_utils import configure_split_stream_logging, parse_log_level


DEFAULT_MAX_DEPTH = 100

_ENV_PREFIX = 'SHAPE_VERIFIER_'


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(_ENV_PREFIX + name, default).strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class VerifierConfig:
    """Settings for verification runs and the command line tools."""
    max_depth: int = DEFAULT_MAX_DEPTH
    strict_shapes: bool = False
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = False

    @classmethod
    def from_env(cls) -> 'VerifierConfig':
        """Create configuration from environment variables."""
        return cls(
            max_depth=int(os.getenv(_ENV_PREFIX + 'MAX_DEPTH', str(DEFAULT_MAX_DEPTH))),
            strict_shapes=_env_flag('STRICT_SHAPES', 'false'),
            log_level=os.getenv(_ENV_PREFIX + 'LOG_LEVEL', 'INFO'),
            print_level=os.getenv(_ENV_PREFIX + 'PRINT_LEVEL', 'ERROR'),
            cache_enabled=_env_flag('CACHE_ENABLED', 'false'),
        )

    def with_overrides(self, **overrides) -> 'VerifierConfig':
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = parse_log_level(self.log_level, logging.INFO)
        stderr_level = parse_log_level(self.print_level, logging.ERROR)

        configure_split_stream_logging(level=level, stderr_level=stderr_level)

        return logging.getLogger('shape_verifier')


# Global configuration instance
verifier_config = VerifierConfig.from_env()
