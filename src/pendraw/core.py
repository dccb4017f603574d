import os
from typing import Any, Dict, Optional

from .config import AppConfig
from .language.validator import validate_program
from .runtime.canvas import Canvas, RecordingCanvas
from .runtime.interpreter import Interpreter
from .utils import logger


# --- Program files ---
def load_program(path: str) -> str:
    """Loads a script from a text file."""
    with open(path, 'r') as f:
        return f.read()


def save_program(path: str, program: str):
    """Saves a script to a text file, creating parent directories as needed."""
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    with open(path, 'w') as f:
        f.write(program)


# --- Host entry points ---
def run_script(
    program: str,
    canvas: Optional[Canvas] = None,
    strict_endif: bool = AppConfig.STRICT_ENDIF,
) -> Dict[str, Any]:
    """Runs a whole script on a fresh interpreter and reports the result as a status dictionary."""
    canvas = canvas if canvas is not None else RecordingCanvas()
    interpreter = Interpreter(canvas, strict_endif=strict_endif)
    outcome = interpreter.execute_program(program)

    result = outcome.to_dict()
    result["state"] = interpreter.snapshot()
    if isinstance(canvas, RecordingCanvas):
        result["operations"] = len(canvas.operations)
    if outcome.ok:
        result["message"] = "Program executed successfully."
    else:
        logger.warning("%s", outcome.error)
    return result


def check_script(program: str, collect_all: bool = False) -> Dict[str, Any]:
    """Pre-flights a script without running it."""
    return validate_program(program, collect_all=collect_all).to_dict()
