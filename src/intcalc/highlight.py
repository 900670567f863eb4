"""Pygments lexer for intcalc expressions."""

from pygments.lexer import RegexLexer
from pygments.token import (
    Comment,
    Name,
    Number,
    Operator,
    Punctuation,
    Text,
)


class CalcLexer(RegexLexer):
    """Pygments lexer for intcalc arithmetic expressions.

    Mirrors the evaluator's lexer: only the letter ``s`` is meaningful (the
    square function), so the letters after it are shown with it and every
    other character the calculator ignores is shown as a comment.
    """

    name = "intcalc"
    aliases = ["intcalc"]
    filenames = ["*.calc"]
    mimetypes = ["text/x-intcalc"]

    tokens = {
        "root": [
            # Whitespace
            (r"\s+", Text),
            # Numbers
            (r"[0-9]+", Number.Integer),
            # Square function: the marker plus any letters it swallows
            (r"s[a-rt-zA-Z]*", Name.Builtin),
            # Operators
            (r"[+\-*/%]", Operator),
            # Grouping
            (r"[()]", Punctuation),
            # Letters the lexer drops
            (r"[a-rt-zA-Z]+", Comment),
            # Anything else the lexer drops
            (r".", Comment),
        ],
    }
