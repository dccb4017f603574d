from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Sequence, Tuple

from ..errors import MismatchedBlock, NestedBlockNotSupported
from ..utils import keyword_of, logger


class SourceLine(NamedTuple):
    number: int
    text: str


def skip_to_endif(lines: Sequence[SourceLine], start: int) -> int:
    """Returns the index just past the ``endif`` matching an ``if`` that ends before ``start``.

    Nested ``if`` lines are counted so the match stays balanced.
    """
    depth = 1
    for index in range(start, len(lines)):
        keyword = keyword_of(lines[index].text)
        if keyword == "if":
            depth += 1
        elif keyword == "endif":
            depth -= 1
            if depth == 0:
                return index + 1
    raise MismatchedBlock("Mismatched 'if' and 'endif' statements.")


@dataclass
class Capture:
    kind: str  # "loop" or "method"
    name: Optional[str] = None
    params: Tuple[str, ...] = ()
    lines: List[SourceLine] = field(default_factory=list)


CLOSERS = {"loop": "endloop", "method": "endmethod"}


class ControlFlowTracker:
    """Tracks if/loop/method state for a single interpreter.

    At most one capture (loop or method body) is open at a time. While it is
    open, lines are collected verbatim instead of being executed.
    """

    def __init__(self, strict_endif: bool = False):
        self.strict_endif = strict_endif
        self._if_depth = 0
        self._capture: Optional[Capture] = None

    @property
    def inside_if(self) -> bool:
        return self._if_depth > 0

    @property
    def inside_loop(self) -> bool:
        return self._capture is not None and self._capture.kind == "loop"

    @property
    def inside_method(self) -> bool:
        return self._capture is not None and self._capture.kind == "method"

    @property
    def capturing(self) -> bool:
        return self._capture is not None

    @property
    def current_method(self) -> Optional[str]:
        return self._capture.name if self.inside_method else None

    def enter_if(self):
        self._if_depth += 1

    def skipped_if(self):
        """A false ``if`` and its body were skipped up to the matching ``endif``."""
        if not self.strict_endif:
            self._if_depth = 0

    def exit_if(self):
        if self._if_depth == 0:
            if self.strict_endif:
                raise MismatchedBlock("Mismatched endif statement.")
            logger.debug("endif outside an if-block ignored")
            return
        if self.strict_endif:
            self._if_depth -= 1
        else:
            self._if_depth = 0

    def _open(self, capture: Capture):
        if self._capture is not None:
            raise NestedBlockNotSupported(
                f"Cannot open a {capture.kind} while a {self._capture.kind} is being defined.")
        self._capture = capture

    def open_loop(self):
        self._open(Capture("loop"))

    def open_method(self, name: str, params: Sequence[str] = ()):
        self._open(Capture("method", name, tuple(params)))

    def _close(self, kind: str) -> Capture:
        if self._capture is None or self._capture.kind != kind:
            raise MismatchedBlock(f"Mismatched {CLOSERS[kind]} statement.")
        capture, self._capture = self._capture, None
        return capture

    def close_loop(self) -> Capture:
        return self._close("loop")

    def close_method(self) -> Capture:
        return self._close("method")

    def feed(self, line: SourceLine) -> Optional[Capture]:
        """Offers a line to the open capture.

        Returns the finished capture when ``line`` closes it, otherwise stores
        the line and returns None.
        """
        keyword = keyword_of(line.text)
        if keyword in CLOSERS:
            raise NestedBlockNotSupported(
                f"Nested {keyword} definitions are not supported.")
        for kind, closer in CLOSERS.items():
            if keyword == closer:
                return self._close(kind)
        self._capture.lines.append(line)
        return None
