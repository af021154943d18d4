"""Hand results to another tool — JSON round-trip."""

from lexemas import LexerConfigBuilder, analyze
from lexemas.serialization import from_json, to_json

config = LexerConfigBuilder().operators("+").comments("#", "{-", "-}").build()
result = analyze("a + 1 @", config)

json_str = to_json(result, indent=2)
restored = from_json(json_str)

print(json_str)
print("Result == restored:", result == restored)
