"""Rendering of verification reports for humans and CI systems."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from ..matcher.report import Report


OUTPUT_FORMATS = ("human", "json", "github-actions")

HUMAN_TEMPLATE = "report.txt.j2"


def _get_template_directory() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")


@dataclass(frozen=True)
class VerificationResult:
    """One verification run, ready for rendering."""
    name: str
    report: Report
    shape_path: Optional[Path] = None
    subject_path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"name": self.name}
        if self.shape_path is not None:
            data["shape"] = str(self.shape_path)
        if self.subject_path is not None:
            data["subject"] = str(self.subject_path)
        data.update(self.report.to_dict())
        return data


def pretty_dump(value: Any) -> str:
    """Pretty-print a decoded document for diagnostics."""
    return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False, default=str)


def _escape_workflow_data(value: str) -> str:
    """Escape a workflow command message so it stays on one line."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_workflow_property(value: str) -> str:
    """Escape a workflow command property value such as ``file=``."""
    return _escape_workflow_data(value).replace(":", "%3A").replace(",", "%2C")


def log_report(report: Report, shape: Any, subject: Any, logger: logging.Logger) -> None:
    """Write a failed report to *logger* along with dumps of both documents."""
    if report.ok:
        logger.debug("Subject matches the shape")
        return

    logger.debug(f"Shape:\n{pretty_dump(shape)}")
    logger.debug(f"Subject:\n{pretty_dump(subject)}")
    for message in report.messages:
        logger.error(message)


class ReportRenderer:
    """Formats verification results as text."""

    def __init__(self, template_dir: str | None = None):
        self.template_dir = template_dir or _get_template_directory()
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            newline_sequence="\n",
            autoescape=False,
        )

    def render(self, results: Sequence[VerificationResult], fmt: str = "human") -> str:
        if fmt == "json":
            return self.render_json(results)
        if fmt == "github-actions":
            return self.render_github_actions(results)
        if fmt == "human":
            return self.render_human(results)
        raise ValueError(f"Unknown output format: '{fmt}'. Valid formats: {', '.join(OUTPUT_FORMATS)}")

    def render_human(self, results: Sequence[VerificationResult]) -> str:
        template = self.env.get_template(HUMAN_TEMPLATE)
        failed = sum(1 for r in results if not r.report.ok)
        return template.render(results=results, failed=failed)

    @staticmethod
    def render_json(results: Sequence[VerificationResult]) -> str:
        output = {
            "documents": len(results),
            "errors": sum(len(r.report.messages) for r in results),
            "results": [r.to_dict() for r in results],
        }
        return json.dumps(output, indent=2)

    @staticmethod
    def render_github_actions(results: Sequence[VerificationResult]) -> str:
        lines: List[str] = []
        for result in results:
            file_name = result.subject_path if result.subject_path is not None else result.name
            for message in result.report.messages:
                lines.append(
                    f"::error file={_escape_workflow_property(str(file_name))}::{_escape_workflow_data(message)}"
                )
        return "\n".join(lines) + ("\n" if lines else "")
