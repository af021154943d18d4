"""Thread safe — one Lexer, 1000 sources analyzed in parallel."""

from concurrent.futures import ThreadPoolExecutor

from lexemas import Lexer, LexerConfigBuilder

config = (
    LexerConfigBuilder()
    .reserved("retornar")
    .operators("=", "*")
    .punctuation(";")
    .comments("//", "/*", "*/")
    .build()
)
lexer = Lexer(config)

sources = [f"x{i} = {i} * {i}; retornar x{i};" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lexer.analyze, sources))

print(f"Analyzed {len(results)} sources in parallel")
print("Tokens in first source:", len(results[0].tokens))
print("All clean:", all(r.ok for r in results))
