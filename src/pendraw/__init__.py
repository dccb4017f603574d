from .config import AppConfig
from .core import check_script, load_program, run_script, save_program
from .errors import ErrorKind, Outcome, ScriptError
from .language.validator import SyntaxReport, validate_program
from .runtime.canvas import Canvas, RecordingCanvas, TurtleCanvas
from .runtime.interpreter import Interpreter
from .utils import logger

__version__: str = "0.1.0"

__all__ = [
    "AppConfig", "Canvas", "ErrorKind", "Interpreter", "Outcome", "RecordingCanvas",
    "ScriptError", "SyntaxReport", "TurtleCanvas", "check_script", "load_program",
    "logger", "run_script", "save_program", "validate_program",
]
