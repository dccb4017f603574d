from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    DUPLICATE_DEFINITION = "DuplicateDefinition"
    UNDEFINED_VARIABLE = "UndefinedVariable"
    UNDEFINED_METHOD = "UndefinedMethod"
    ARITY_MISMATCH = "ArityMismatch"
    MALFORMED_CONDITION = "MalformedCondition"
    UNKNOWN_OPERATOR = "UnknownOperator"
    INVALID_OPERAND = "InvalidOperand"
    UNKNOWN_COMMAND = "UnknownCommand"
    MALFORMED_COMMAND = "MalformedCommand"
    MISMATCHED_BLOCK = "MismatchedBlock"
    NESTED_BLOCK_NOT_SUPPORTED = "NestedBlockNotSupported"
    RECURSION_NOT_SUPPORTED = "RecursionNotSupported"


class ScriptError(ValueError):
    """Base class for every error a script can raise while it is parsed or run.

    ``line`` and ``line_number`` are filled in by the runner with the
    innermost line being executed when the error surfaced.
    """
    kind: ErrorKind

    def __init__(self, message: str, line: Optional[str] = None, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.line_number = line_number

    def attach(self, line: str, line_number: Optional[int]) -> "ScriptError":
        if self.line is None:
            self.line = line
            self.line_number = line_number
        return self

    def __str__(self):
        if self.line is None:
            return f"{self.kind.value}: {self.message}"
        where = f"line {self.line_number}" if self.line_number is not None else "line"
        return f"{self.kind.value}: {self.message} ({where}: '{self.line}')"


class DuplicateDefinition(ScriptError):
    kind = ErrorKind.DUPLICATE_DEFINITION


class UndefinedVariable(ScriptError):
    kind = ErrorKind.UNDEFINED_VARIABLE


class UndefinedMethod(ScriptError):
    kind = ErrorKind.UNDEFINED_METHOD


class ArityMismatch(ScriptError):
    kind = ErrorKind.ARITY_MISMATCH


class MalformedCondition(ScriptError):
    kind = ErrorKind.MALFORMED_CONDITION


class UnknownOperator(ScriptError):
    kind = ErrorKind.UNKNOWN_OPERATOR


class InvalidOperand(ScriptError):
    kind = ErrorKind.INVALID_OPERAND


class UnknownCommand(ScriptError):
    kind = ErrorKind.UNKNOWN_COMMAND


class MalformedCommand(ScriptError):
    kind = ErrorKind.MALFORMED_COMMAND


class MismatchedBlock(ScriptError):
    kind = ErrorKind.MISMATCHED_BLOCK


class NestedBlockNotSupported(ScriptError):
    kind = ErrorKind.NESTED_BLOCK_NOT_SUPPORTED


class RecursionNotSupported(ScriptError):
    kind = ErrorKind.RECURSION_NOT_SUPPORTED


@dataclass
class Outcome:
    """Result of running a program or a method call: success, or the error that stopped it."""
    status: str = "success"
    error: Optional[ScriptError] = None

    @classmethod
    def success(cls) -> "Outcome":
        return cls()

    @classmethod
    def failure(cls, error: ScriptError) -> "Outcome":
        return cls(status="error", error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def raise_for_error(self):
        if self.error is not None:
            raise self.error

    def to_dict(self) -> Dict[str, Any]:
        if self.error is None:
            return {"status": "success"}
        return {
            "status": "error",
            "kind": self.error.kind.value,
            "message": self.error.message,
            "line": self.error.line,
            "line_number": self.error.line_number,
        }
