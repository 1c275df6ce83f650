#!/usr/bin/env python3
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

"""CLI entry point for verifying JSON/YAML documents against shapes."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from ..config import VerifierConfig, verifier_config
from ..exceptions import ShapeVerifierError
from ..matcher.engine import ShapeMatcher
from ..models.manifest_schema import ManifestCheck, load_manifest
from ..parsers.document_parser import DocumentParser
from ..reporting.renderer import OUTPUT_FORMATS, ReportRenderer, VerificationResult, log_report

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='shape-verify',
        description='Verify that JSON/YAML documents have the keys and nesting described by a shape',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('shape', nargs='?', help='Shape document (JSON or YAML)')
    parser.add_argument('subject', nargs='?', help='Document to verify (JSON or YAML)')
    parser.add_argument(
        '--manifest',
        help='Manifest listing shape/subject pairs to verify in one run',
    )
    parser.add_argument(
        '--format',
        choices=OUTPUT_FORMATS,
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Reject ambiguous shapes (several wildcards per level, multi-element array shapes)',
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        default=None,
        help=f'Maximum nesting depth (default: {verifier_config.max_depth})',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help=f'Logging level (default: {verifier_config.log_level})',
    )
    return parser


def verify_check(check: ManifestCheck, config: VerifierConfig, parser: DocumentParser) -> VerificationResult:
    """Load both documents of *check* and verify them.

    Raises:
        ShapeVerifierError: If a document cannot be loaded or the shape is unusable
    """
    shape = parser.load(check.shape_path)
    subject = parser.load(check.subject_path)

    if check.strict is not None:
        config = config.with_overrides(strict_shapes=check.strict)

    logger.debug(f"Verifying {check.subject_path} against {check.shape_path}")
    report = ShapeMatcher.from_config(config).verify(shape, subject)
    log_report(report, shape, subject, logger)

    return VerificationResult(
        name=check.name,
        report=report,
        shape_path=check.shape_path,
        subject_path=check.subject_path,
    )


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the verifier CLI."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    if args.manifest and (args.shape or args.subject):
        arg_parser.error('SHAPE/SUBJECT cannot be combined with --manifest')
    if not args.manifest and not (args.shape and args.subject):
        arg_parser.error('SHAPE and SUBJECT are required unless --manifest is given')
    if args.max_depth is not None and args.max_depth < 1:
        arg_parser.error('--max-depth must be positive')

    config = verifier_config.with_overrides(
        max_depth=args.max_depth,
        strict_shapes=True if args.strict else None,
        log_level=args.log_level,
    )
    config.set_logging()

    document_parser = DocumentParser(cache_enabled=config.cache_enabled)

    try:
        if args.manifest:
            checks = load_manifest(args.manifest, parser=document_parser)
        else:
            checks = [
                ManifestCheck(
                    name=args.subject,
                    shape_path=Path(args.shape),
                    subject_path=Path(args.subject),
                )
            ]
        results = [verify_check(check, config, document_parser) for check in checks]
    except ShapeVerifierError as exc:
        logger.error(str(exc))
        sys.exit(1)

    sys.stdout.write(ReportRenderer().render(results, args.format))

    # Exit with error code if any document failed
    if any(not result.report.ok for result in results):
        sys.exit(1)
    sys.exit(0)


if __name__ == '__main__':
    main()
