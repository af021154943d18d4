"""Malformed input never raises — every problem is reported with its position."""

from lexemas import LexerConfigBuilder, analyze

config = (
    LexerConfigBuilder()
    .operators("=", "+")
    .punctuation(";")
    .grouping("(", ")")
    .comments("//", "/*", "*/")
    .build()
)

result = analyze('total = 585f + 12. ;\n"sin cerrar\n', config)

if result.ok:
    print("No lexical errors")
else:
    for error in result.errors:
        print(f"{error.position}: {error.message}: {error.text!r}")
