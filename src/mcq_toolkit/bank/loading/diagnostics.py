"""
Module: bank.loading.diagnostics

Captures question blocks the parser had to drop and generates a diagnostic
report for fixing the source file.

Structure:
- Each issue names the line where the block failed, the offending value
  and the prompt of the dropped block
- The report groups issue counts by kind
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class IssueKind(str, Enum):
    """Why a question block was dropped."""

    INVALID_OPTION = "invalid_option"
    DUPLICATE_OPTION = "duplicate_option"
    TRUNCATED_BLOCK = "truncated_block"
    MISSING_ANSWER = "missing_answer"
    INVALID_ANSWER = "invalid_answer"


@dataclass(frozen=True)
class ParseIssue:
    """
    A single dropped question block.

    Fields:
    - line_number: 1-based line where the block failed (last line read if
      the input ended early)
    - value: The offending text, trimmed
    - prompt: Prompt of the dropped block, for locating it in the source
    """
    kind: IssueKind
    line_number: int
    message: str
    value: str = ""
    prompt: str = ""

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "kind": self.kind.value,
            "line_number": self.line_number,
            "message": self.message,
        }
        if self.value:
            d["value"] = self.value
        if self.prompt:
            d["prompt"] = self.prompt
        return d


class DiagnosticsCollector:
    """
    Collector for parse issues.

    Every issue is logged at WARNING as it is recorded.
    """

    def __init__(self, source: str = ""):
        self.source = source
        self._issues: List[ParseIssue] = []

    def add(
        self,
        kind: IssueKind,
        line_number: int,
        message: str,
        *,
        value: str = "",
        prompt: str = "",
    ) -> ParseIssue:
        """Record an issue and return it."""
        issue = ParseIssue(
            kind=kind,
            line_number=line_number,
            message=message,
            value=value,
            prompt=prompt,
        )
        self._issues.append(issue)
        logger.warning(f"Line {line_number}: {message}")
        return issue

    @property
    def issues(self) -> List[ParseIssue]:
        return list(self._issues)

    @property
    def issue_count(self) -> int:
        return len(self._issues)

    def generate_report(self) -> ParseDiagnosticsReport:
        return ParseDiagnosticsReport.from_issues(self.issues, self.source)


@dataclass
class ParseDiagnosticsReport:
    """Complete diagnostics report."""
    generated_at: str
    source: str
    total_issues: int
    summary_by_kind: Dict[str, int]
    issues: List[ParseIssue]

    @classmethod
    def from_issues(
        cls, issues: List[ParseIssue], source: Optional[str] = None
    ) -> ParseDiagnosticsReport:
        summary_by_kind: Dict[str, int] = {}
        for issue in issues:
            summary_by_kind[issue.kind.value] = summary_by_kind.get(issue.kind.value, 0) + 1

        return cls(
            generated_at=datetime.now(timezone.utc).isoformat(),
            source=source or "",
            total_issues=len(issues),
            summary_by_kind=summary_by_kind,
            issues=issues,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "source": self.source,
            "total_issues": self.total_issues,
            "summary_by_kind": self.summary_by_kind,
            "issues": [issue.to_dict() for issue in self.issues],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.info(f"Parse diagnostics saved: {path}")
