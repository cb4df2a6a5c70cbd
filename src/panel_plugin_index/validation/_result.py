from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass
class ValidationIssue:
    """A single validation finding (error or warning)."""

    level: Literal["error", "warning"]
    code: str  # stable identifier, e.g. "MissingField" or "UnknownHook"
    path: str  # manifest field or plugin-relative file the issue is about
    message: str

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


@dataclass
class ValidationResult:
    """Result of validating one plugin.

    Attributes:
        issues: All errors and warnings in rule order. Use .errors and .warnings
            for filtered views (order preserved).
        valid: True if there are no errors (warnings are allowed).
    """

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not any(i.level == "error" for i in self.issues)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "warning"]

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "error"]

    def error(self, code: str, path: str, message: str) -> None:
        self.issues.append(ValidationIssue("error", code, path, message))

    def warning(self, code: str, path: str, message: str) -> None:
        self.issues.append(ValidationIssue("warning", code, path, message))
