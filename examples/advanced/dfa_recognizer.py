"""Swap a hand-written recognizer for a table-driven automaton.

Builds a DFA for hexadecimal integers (0x followed by hex digits) and
plugs it into the NUMBER slot. Priority order does not change.
"""

from lexemas import Lexer, LexerConfigBuilder, RecognizerSlot
from lexemas.lexer.dfa import DfaBuilder, DfaRecognizer

builder: DfaBuilder[str] = DfaBuilder()
start, zero, x, digits = (builder.add_state() for _ in range(4))
builder.on_char(start, "0", zero).on_char(zero, "x", x)
builder.on_range(x, "0", "9", digits).on_range(x, "a", "f", digits)
builder.on_range(digits, "0", "9", digits).on_range(digits, "a", "f", digits)
builder.set_accepting(digits, "hex")

config = LexerConfigBuilder().operators("+").comments("//", "/*", "*/").build()
lexer = Lexer(config, recognizers={RecognizerSlot.NUMBER: DfaRecognizer(builder.build(start))})

for token in lexer.analyze("0xff + 0x1a"):
    print(token)
