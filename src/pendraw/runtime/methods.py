from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from ..errors import ArityMismatch, DuplicateDefinition, RecursionNotSupported, UndefinedMethod
from ..utils import logger
from .control_flow import SourceLine
from .variables import VariableStore


@dataclass(frozen=True)
class Method:
    name: str
    params: Tuple[str, ...]
    body: Tuple[SourceLine, ...]


class MethodRegistry:
    def __init__(self, variables: VariableStore):
        self.variables = variables
        self._methods: Dict[str, Method] = {}
        self._active: List[str] = []

    def define(self, name: str, params: Sequence[str], body: Sequence[SourceLine]) -> Method:
        if name in self._methods:
            raise DuplicateDefinition(f"Method '{name}' is already defined.")
        method = Method(name, tuple(params), tuple(body))
        self._methods[name] = method
        logger.debug("defined method %s(%s) with %d line(s)", name, ", ".join(method.params), len(method.body))
        return method

    def lookup(self, name: str) -> Tuple[Tuple[str, ...], Tuple[SourceLine, ...]]:
        method = self._get(name)
        return method.params, method.body

    def _get(self, name: str) -> Method:
        try:
            return self._methods[name]
        except KeyError:
            raise UndefinedMethod(f"Method '{name}' is not defined.") from None

    def invoke(self, name: str, args: Sequence[float], run_lines: Callable[[Sequence[SourceLine]], None]):
        """Runs a method body with its parameters bound to ``args`` for the duration of the call."""
        method = self._get(name)
        if len(args) != len(method.params):
            raise ArityMismatch(
                f"Method '{name}' takes {len(method.params)} argument(s) but {len(args)} were given.")
        if name in self._active:
            raise RecursionNotSupported(
                f"Method '{name}' cannot be called from itself ({' -> '.join(self._active + [name])}).")

        self._active.append(name)
        try:
            with self.variables.bind(dict(zip(method.params, args))):
                run_lines(method.body)
        finally:
            self._active.pop()

    def names(self) -> List[str]:
        return list(self._methods)

    def __contains__(self, name):
        return name in self._methods

    def __len__(self):
        return len(self._methods)
