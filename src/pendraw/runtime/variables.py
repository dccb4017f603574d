import re
from contextlib import contextmanager
from typing import Dict, Iterator, List, Mapping

from ..errors import DuplicateDefinition, InvalidOperand, UndefinedVariable

NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

_MISSING = object()


class VariableStore:
    """A single global namespace of float variables.

    ``define`` creates a name once, ``set`` only updates existing names.
    """

    def __init__(self):
        self._values: Dict[str, float] = {}

    def define(self, name: str, value: float):
        if name in self._values:
            raise DuplicateDefinition(f"Variable '{name}' is already defined.")
        self._values[name] = float(value)

    def set(self, name: str, value: float):
        if name not in self._values:
            raise UndefinedVariable(f"Variable '{name}' is not defined.")
        self._values[name] = float(value)

    def get(self, name: str) -> float:
        try:
            return self._values[name]
        except KeyError:
            raise UndefinedVariable(f"Variable '{name}' is not defined.") from None

    def resolve(self, token: str) -> float:
        """Returns the value of a variable, or parses ``token`` as a numeric literal."""
        if token in self._values:
            return self._values[token]
        if NUMBER_RE.fullmatch(token):
            return float(token)
        raise InvalidOperand(f"Unable to parse '{token}' as a number or variable.")

    @contextmanager
    def bind(self, bindings: Mapping[str, float]) -> Iterator["VariableStore"]:
        """Temporarily binds names, restoring whatever was there before on exit."""
        saved = {name: self._values.get(name, _MISSING) for name in bindings}
        for name, value in bindings.items():
            self._values[name] = float(value)
        try:
            yield self
        finally:
            for name, previous in saved.items():
                if previous is _MISSING:
                    self._values.pop(name, None)
                else:
                    self._values[name] = previous

    def names(self) -> List[str]:
        return list(self._values)

    def as_dict(self) -> Dict[str, float]:
        return dict(self._values)

    def __contains__(self, name):
        return name in self._values

    def __len__(self):
        return len(self._values)
