from typing import Callable, Sequence

from ..config import AppConfig
from ..language import commands as c
from ..utils import logger
from .canvas import Canvas
from .control_flow import Capture, ControlFlowTracker, SourceLine
from .evaluator import Evaluator
from .methods import MethodRegistry
from .pen import PenState, Point
from .variables import VariableStore

# Returned by ``dispatch`` when a false ``if`` requires the caller to skip to its ``endif``.
SKIP_TO_ENDIF = object()


class Dispatcher:
    """Executes typed commands against the interpreter state and the canvas."""

    def __init__(self, variables: VariableStore, evaluator: Evaluator, methods: MethodRegistry,
                 tracker: ControlFlowTracker, pen: PenState, canvas: Canvas,
                 run_lines: Callable[[Sequence[SourceLine]], None]):
        self.variables = variables
        self.evaluator = evaluator
        self.methods = methods
        self.tracker = tracker
        self.pen = pen
        self.canvas = canvas
        self.run_lines = run_lines
        self._handlers = {
            c.MoveTo: self.move_to,
            c.DrawTo: self.draw_to,
            c.Rectangle: self.rectangle,
            c.Circle: self.circle,
            c.Triangle: self.triangle,
            c.SetColor: self.set_color,
            c.Reset: self.reset,
            c.Fill: self.fill,
            c.LineWidth: self.line_width,
            c.Rotate: self.rotate,
            c.Text: self.text,
            c.Clear: self.clear,
            c.VarDef: self.var_def,
            c.VarSet: self.var_set,
            c.If: self.if_,
            c.EndIf: self.end_if,
            c.Loop: self.loop,
            c.EndLoop: self.end_loop,
            c.MethodDef: self.method_def,
            c.EndMethod: self.end_method,
            c.Call: self.call,
        }

    def dispatch(self, command: c.Command):
        return self._handlers[type(command)](command)

    def finish_block(self, capture: Capture):
        """Handles a capture closed by ``endloop`` or ``endmethod``."""
        if capture.kind == "loop":
            logger.debug("replaying loop of %d line(s)", len(capture.lines))
            self.run_lines(capture.lines)
        else:
            self.methods.define(capture.name, capture.params, capture.lines)

    def _num(self, token) -> float:
        return self.evaluator.number(token)

    # --- Drawing ---

    def move_to(self, cmd: c.MoveTo):
        position = self.pen.move_to(self._num(cmd.x), self._num(cmd.y))
        self.canvas.move_cursor(position)

    def draw_to(self, cmd: c.DrawTo):
        start = self.pen.position
        end = Point(self._num(cmd.x), self._num(cmd.y))
        self.canvas.draw_line(start, end, self.pen.pen())
        self.pen.position = end
        self.canvas.refresh()

    def rectangle(self, cmd: c.Rectangle):
        width, height = self._num(cmd.width), self._num(cmd.height)
        draw = self.canvas.fill_rect if self.pen.fill else self.canvas.draw_rect
        draw(self.pen.position, width, height, self.pen.pen())
        self.canvas.refresh()

    def circle(self, cmd: c.Circle):
        radius = self._num(cmd.radius)
        draw = self.canvas.fill_ellipse if self.pen.fill else self.canvas.draw_ellipse
        draw(self.pen.position, radius, self.pen.pen())
        self.canvas.refresh()

    def triangle(self, cmd: c.Triangle):
        values = [self._num(token) for token in cmd.coords]
        points = [Point(values[i], values[i + 1]) for i in range(0, 6, 2)]
        draw = self.canvas.fill_polygon if self.pen.fill else self.canvas.draw_polygon
        draw(points, self.pen.pen())
        self.canvas.refresh()

    def text(self, cmd: c.Text):
        self.canvas.draw_text(cmd.content, self.pen.position, self.pen.text_color)
        self.canvas.refresh()

    def clear(self, cmd: c.Clear):
        self.canvas.clear(AppConfig.CLEAR_COLOR)
        self.pen.reset_position()
        self.canvas.refresh()

    def reset(self, cmd: c.Reset):
        self.canvas.move_cursor(self.pen.reset_position())

    # --- Style ---

    def set_color(self, cmd: c.SetColor):
        self.pen.color = cmd.name

    def fill(self, cmd: c.Fill):
        self.pen.fill = cmd.enabled

    def line_width(self, cmd: c.LineWidth):
        self.pen.thickness = self._num(cmd.width)

    def rotate(self, cmd: c.Rotate):
        self.pen.rotation = self._num(cmd.angle)

    # --- Variables ---

    def var_def(self, cmd: c.VarDef):
        self.variables.define(cmd.name, self._num(cmd.value))

    def var_set(self, cmd: c.VarSet):
        self.variables.set(cmd.name, self._num(cmd.value))

    # --- Blocks ---

    def if_(self, cmd: c.If):
        if self.evaluator.evaluate_condition(cmd.condition):
            self.tracker.enter_if()
            return None
        return SKIP_TO_ENDIF

    def end_if(self, cmd: c.EndIf):
        self.tracker.exit_if()

    def loop(self, cmd: c.Loop):
        self.tracker.open_loop()

    def end_loop(self, cmd: c.EndLoop):
        self.finish_block(self.tracker.close_loop())

    def method_def(self, cmd: c.MethodDef):
        self.tracker.open_method(cmd.name, cmd.params)

    def end_method(self, cmd: c.EndMethod):
        self.finish_block(self.tracker.close_method())

    def call(self, cmd: c.Call):
        args = [self._num(token) for token in cmd.args]
        self.methods.invoke(cmd.name, args, self.run_lines)
