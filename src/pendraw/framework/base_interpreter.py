from functools import lru_cache

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput, VisitError

from ..errors import MalformedCommand, ScriptError


class BaseInterpreter(Transformer):
    def NAME(self, name):
        return name.value

    def NUMBER(self, num):
        # Operands stay textual; variables are only resolved at execution time.
        return num.value

    def REST(self, rest):
        return rest.value.strip()


@lru_cache(maxsize=None)
def get_parser(grammar_path: str, parser: str = "lalr") -> Lark:
    """Loads and compiles a Lark grammar once per path."""
    with open(grammar_path, 'r') as f:
        grammar = f.read()

    return Lark(grammar, parser=parser)


def parse_text(text: str, grammar_path: str, interpreter_instance: Transformer, parser: str = "lalr"):
    """
    Parses text with the grammar at ``grammar_path`` and transforms the tree.

    Args:
        text: The source to parse.
        grammar_path: The file path to the Lark grammar.
        interpreter_instance: An already created transformer instance.

    Lark parse failures are reported as ``MalformedCommand``; a ``ScriptError``
    raised inside a transformer callback is unwrapped from Lark's ``VisitError``.
    """
    try:
        tree = get_parser(grammar_path, parser).parse(text)
    except UnexpectedInput as e:
        raise MalformedCommand(f"Cannot parse '{text}' (column {e.column}).") from e

    try:
        return interpreter_instance.transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ScriptError):
            raise e.orig_exc from None
        raise


__all__ = ["BaseInterpreter", "get_parser", "parse_text", "v_args"]
