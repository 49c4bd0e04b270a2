"""Keyword sets for O(1) identifier classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

The sets are disjoint; tests/test_keywords.py enforces it.

Usage:
    from solex.lexer.keywords import KEYWORDS

    if name in KEYWORDS:  # O(1) lookup
        ...
"""

KEYWORDS: frozenset[str] = frozenset(
    {
        "anonymous",
        "as",
        "assembly",
        "break",
        "constant",
        "continue",
        "contract",
        "delete",
        "do",
        "else",
        "enum",
        "event",
        "external",
        "for",
        "function",
        "hex",
        "if",
        "import",
        "indexed",
        "interface",
        "internal",
        "is",
        "library",
        "mapping",
        "memory",
        "modifier",
        "new",
        "payable",
        "pragma",
        "private",
        "public",
        "return",
        "returns",
        "storage",
        "struct",
        "throw",
        "using",
        "var",
        "while",
    }
)

# Sized integer and byte-array types: int8..int256, uint8..uint256, bytes1..bytes32
_SIZED_TYPES = frozenset(
    [f"int{bits}" for bits in range(8, 257, 8)]
    + [f"uint{bits}" for bits in range(8, 257, 8)]
    + [f"bytes{size}" for size in range(1, 33)]
)

# Fixed-point types: fixedMxN / ufixedMxN, M in 8..256 step 8, N in 0..80
_FIXED_TYPES = frozenset(
    f"{prefix}{bits}x{decimals}"
    for prefix in ("fixed", "ufixed")
    for bits in range(8, 257, 8)
    for decimals in range(81)
)

KEYWORD_TYPES: frozenset[str] = (
    frozenset(
        {
            "address",
            "bool",
            "byte",
            "bytes",
            "fixed",
            "int",
            "string",
            "ufixed",
            "uint",
        }
    )
    | _SIZED_TYPES
    | _FIXED_TYPES
)

# Ether denominations and time units
CONSTANTS: frozenset[str] = frozenset(
    {
        "wei",
        "finney",
        "szabo",
        "ether",
        "seconds",
        "minutes",
        "hours",
        "days",
        "weeks",
        "years",
    }
)

RESERVED: frozenset[str] = frozenset(
    {
        "abstract",
        "after",
        "case",
        "catch",
        "default",
        "final",
        "in",
        "inline",
        "let",
        "match",
        "null",
        "of",
        "pure",
        "relocatable",
        "static",
        "switch",
        "try",
        "type",
        "typeof",
        "view",
    }
)

# Nothing is a builtin by name today; true/false/NULL are matched by a
# dedicated rule before identifiers.
BUILTINS: frozenset[str] = frozenset()
