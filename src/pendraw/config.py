import os


class AppConfig:
    """Centralized configuration for the interpreter and its hosts."""
    PACKAGE_ROOT = os.path.dirname(os.path.abspath(__file__))
    GRAMMAR_FILE = os.path.join("language", "grammar.lark")
    PARSER = "lalr"

    # endif outside an open if-block is a no-op unless this is set
    STRICT_ENDIF = False

    ORIGIN = (0.0, 0.0)
    DEFAULT_COLOR = "black"
    DEFAULT_TEXT_COLOR = "black"
    DEFAULT_LINE_WIDTH = 1.0
    CLEAR_COLOR = "white"

    CANVAS_WIDTH = 640
    CANVAS_HEIGHT = 480
    TEXT_FONT = ("Arial", 12, "normal")

    LOG_LEVEL = os.environ.get("PENDRAW_LOG_LEVEL", "WARNING").upper()

    @staticmethod
    def get_grammar_path(grammar_file: str = GRAMMAR_FILE) -> str:
        """Constructs the full path to a grammar file shipped with the package."""
        return os.path.join(AppConfig.PACKAGE_ROOT, grammar_file)
