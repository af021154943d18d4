"""Tokenize a line of code with a runtime-supplied alphabet."""

from lexemas import LexerConfig, analyze

config = LexerConfig.from_dict({
    "palabrasReservadas": ["si", "sino", "mientras"],
    "operadores": ["=", "==", "+", "<"],
    "puntuacion": [";"],
    "agrupacion": ["(", ")", "{", "}"],
    "comentarios": {"linea": "//", "bloqueInicio": "/*", "bloqueFin": "*/"},
})

result = analyze('si (x < 10) { x = x + 1; } // fin', config)
for token in result.tokens:
    print(f"{token.position}\t{token.type.label}\t{token.lexeme}")
