import threading
from typing import Dict, List, Optional, Sequence

from ..config import AppConfig
from ..errors import Outcome, ScriptError
from ..language.commands import parse_line
from ..language.validator import SyntaxReport, validate_program
from ..utils import logger
from .canvas import Canvas, RecordingCanvas
from .control_flow import ControlFlowTracker, SourceLine, skip_to_endif
from .dispatcher import SKIP_TO_ENDIF, Dispatcher
from .evaluator import Evaluator
from .methods import MethodRegistry
from .pen import PenState, Point
from .variables import VariableStore


def split_program(program: str) -> List[SourceLine]:
    """Splits a script into stripped, non-empty lines numbered from 1."""
    return [
        SourceLine(number, line.strip())
        for number, line in enumerate(program.splitlines(), start=1)
        if line.strip()
    ]


class Interpreter:
    """
    Runs drawing scripts against a canvas.

    All state (variables, methods, pen, open blocks) belongs to the instance
    and survives between ``execute_program`` calls. Public entry points hold
    one lock, so only one script runs against an instance at a time.
    """

    def __init__(self, canvas: Optional[Canvas] = None, strict_endif: bool = AppConfig.STRICT_ENDIF):
        self.canvas = canvas if canvas is not None else RecordingCanvas()
        self.variables = VariableStore()
        self.evaluator = Evaluator(self.variables)
        self.methods = MethodRegistry(self.variables)
        self.tracker = ControlFlowTracker(strict_endif=strict_endif)
        self.pen = PenState()
        self.dispatcher = Dispatcher(self.variables, self.evaluator, self.methods, self.tracker,
                                     self.pen, self.canvas, self._run_lines)
        self._lock = threading.RLock()

    def execute_program(self, program: str) -> Outcome:
        with self._lock:
            try:
                self._run_lines(split_program(program))
            except ScriptError as e:
                logger.info("script stopped: %s", e)
                return Outcome.failure(e)
            self.canvas.refresh()
            return Outcome.success()

    def call_method(self, name: str, args: Sequence[float] = ()) -> Outcome:
        with self._lock:
            try:
                self.methods.invoke(name, [float(a) for a in args], self._run_lines)
            except ScriptError as e:
                logger.info("call to %s failed: %s", name, e)
                return Outcome.failure(e)
            self.canvas.refresh()
            return Outcome.success()

    def check_syntax(self, program: str, collect_all: bool = False) -> SyntaxReport:
        return validate_program(program, collect_all=collect_all)

    def _run_lines(self, lines: Sequence[SourceLine]):
        index = 0
        while index < len(lines):
            line = lines[index]
            index += 1
            try:
                if self.tracker.capturing:
                    finished = self.tracker.feed(line)
                    if finished is not None:
                        self.dispatcher.finish_block(finished)
                    continue

                logger.debug("line %d: %s", line.number, line.text)
                if self.dispatcher.dispatch(parse_line(line.text)) is SKIP_TO_ENDIF:
                    index = skip_to_endif(lines, index)
                    self.tracker.skipped_if()
            except ScriptError as e:
                e.attach(line.text, line.number)
                raise

    # --- Inspection ---

    def get_variable(self, name: str) -> float:
        with self._lock:
            return self.variables.get(name)

    @property
    def position(self) -> Point:
        return self.pen.position

    @property
    def inside_if(self) -> bool:
        return self.tracker.inside_if

    @property
    def inside_loop(self) -> bool:
        return self.tracker.inside_loop

    @property
    def inside_method(self) -> bool:
        return self.tracker.inside_method

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "position": tuple(self.pen.position),
                "color": self.pen.color,
                "thickness": self.pen.thickness,
                "fill": self.pen.fill,
                "rotation": self.pen.rotation,
                "variables": self.variables.as_dict(),
                "methods": self.methods.names(),
            }
