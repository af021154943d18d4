"""Lexical category recognizers for the Lexemas lexer.

Each recognizer is a mixin providing non-consuming recognition for one or
more lexical categories. Recognizers inspect the cursor and return a
Recognition; only the lexer consumes.
"""

from lexemas.lexer.recognizers.comment import CommentRecognizerMixin
from lexemas.lexer.recognizers.identifier import IdentifierRecognizerMixin
from lexemas.lexer.recognizers.numeric import NumericRecognizerMixin
from lexemas.lexer.recognizers.strings import StringRecognizerMixin
from lexemas.lexer.recognizers.symbol import SymbolRecognizerMixin

__all__ = [
    "CommentRecognizerMixin",
    "IdentifierRecognizerMixin",
    "NumericRecognizerMixin",
    "StringRecognizerMixin",
    "SymbolRecognizerMixin",
]
