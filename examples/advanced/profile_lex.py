"""Count engine steps and tokens with profiled_lex."""

from solex import tokenize
from solex.profiling import profiled_lex

source = "function f(uint a) returns (uint) {\n    return a * 2;\n}\n" * 100

with profiled_lex() as metrics:
    tokens = list(tokenize(source))

print(f"{len(tokens)} tokens after merging")
print(metrics.summary())
