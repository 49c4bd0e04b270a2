"""Free-threading safe: lex 1000 sources in parallel."""

from concurrent.futures import ThreadPoolExecutor

from solex import tokenize

sources = [f"contract C{i} {{ uint x = {i}; }}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lambda s: list(tokenize(s)), sources))

print(f"Lexed {len(results)} sources in parallel")
print("First source tokens:", len(results[0]))
print("Last source tokens:", len(results[-1]))
