from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import ErrorKind, ScriptError
from .commands import parse_line


@dataclass(frozen=True)
class SyntaxIssue:
    line_number: int
    line: str
    kind: ErrorKind
    reason: str


@dataclass
class SyntaxReport:
    issues: List[SyntaxIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def first(self) -> Optional[SyntaxIssue]:
        return self.issues[0] if self.issues else None

    @property
    def line(self) -> Optional[str]:
        return self.first.line if self.first else None

    @property
    def line_number(self) -> Optional[int]:
        return self.first.line_number if self.first else None

    @property
    def reason(self) -> Optional[str]:
        return self.first.reason if self.first else None

    def to_dict(self):
        if self.ok:
            return {"status": "success", "message": "All commands have valid syntax."}
        return {
            "status": "error",
            "message": f"Syntax error in command: {self.line}",
            "issues": [
                {"line_number": i.line_number, "line": i.line, "kind": i.kind.value, "reason": i.reason}
                for i in self.issues
            ],
        }


def validate_program(program: str, collect_all: bool = False) -> SyntaxReport:
    """
    Checks the shape of every non-empty line without executing anything.

    Unlike a purely numeric check, operands that look like identifiers are
    deliberately accepted where numbers are expected: they may name variables
    or method parameters that only exist at run time. ``if`` conditions must
    have three single-space separated tokens and a known operator.
    Stops at the first failing line unless ``collect_all`` is set.
    """
    report = SyntaxReport()
    for number, raw in enumerate(program.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            parse_line(line)
        except ScriptError as e:
            report.issues.append(SyntaxIssue(number, line, e.kind, e.message))
            if not collect_all:
                break
    return report
