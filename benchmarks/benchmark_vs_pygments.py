"""Benchmark solex against Pygments' Solidity lexer.

Run with:
    pytest benchmarks/benchmark_vs_pygments.py -v --benchmark-only

Or for quick comparison:
    python benchmarks/benchmark_vs_pygments.py
"""

import time

import pytest
from conftest import CONTRACT


def get_corpus() -> list[str]:
    """Build the contract corpus."""
    return [CONTRACT.format(index=i) for i in range(200)]


def benchmark_solex(docs: list[str], iterations: int = 10) -> float:
    """Benchmark the solex lexer."""
    from solex import tokenize

    # Warmup
    for doc in docs[:10]:
        list(tokenize(doc))

    # Timed runs
    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            list(tokenize(doc))
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def benchmark_pygments(docs: list[str], iterations: int = 10) -> float:
    """Benchmark Pygments' SolidityLexer."""
    try:
        from pygments.lexers.solidity import SolidityLexer
    except ImportError:
        print("pygments not installed. Run: pip install pygments")
        return float("inf")

    lexer = SolidityLexer()

    # Warmup
    for doc in docs[:10]:
        list(lexer.get_tokens(doc))

    # Timed runs
    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            list(lexer.get_tokens(doc))
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def benchmark_threaded(docs: list[str], num_threads: int = 4, iterations: int = 5) -> float | None:
    """Benchmark solex with multiple threads (free-threaded builds only)."""
    import concurrent.futures
    import sys

    from solex import tokenize

    gil_enabled = getattr(sys, "_is_gil_enabled", lambda: True)()
    if gil_enabled:
        return None

    chunks = [docs[i::num_threads] for i in range(num_threads)]

    def work(chunk: list[str]) -> None:
        for d in chunk:
            list(tokenize(d))

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        with concurrent.futures.ThreadPoolExecutor(max_workers=num_threads) as ex:
            list(ex.map(work, chunks))
        times.append(time.perf_counter() - start)

    return sum(times) / len(times)


def main() -> None:
    """Run benchmarks and print results."""
    import sys

    docs = get_corpus()
    print(f"Built {len(docs)} contracts ({sum(map(len, docs))} chars)")
    print(f"Python {sys.version.split()[0]}\n")

    iterations = 10
    print(f"Running {iterations} iterations each...\n")

    print("Benchmarking solex...")
    solex_time = benchmark_solex(docs, iterations)

    print("Benchmarking pygments...")
    pygments_time = benchmark_pygments(docs, iterations)

    print("\n" + "=" * 60)
    print("RESULTS: Tokenize contract corpus (single thread)")
    print("=" * 60)

    results = [("solex", solex_time), ("pygments", pygments_time)]
    results.sort(key=lambda x: x[1])
    baseline = results[0][1]

    for name, time_val in results:
        if time_val == float("inf"):
            print(f"{name:20} not installed")
        else:
            ratio = time_val / baseline if baseline > 0 else 0
            print(f"{name:20} {time_val * 1000:8.2f}ms  ({ratio:.2f}x)")

    threaded = benchmark_threaded(docs)
    if threaded:
        print(f"\n{'solex (4 threads)':20} {threaded * 1000:8.2f}ms  (speedup: {solex_time / threaded:.1f}x)")

    print("\nNote: solex guarantees linear-time lexing on any input.")


# pytest-benchmark integration
@pytest.mark.benchmark(group="lex-corpus")
def test_benchmark_solex(benchmark, contract_corpus):
    """Benchmark solex on the contract corpus."""
    from solex import tokenize

    def lex_all():
        for doc in contract_corpus:
            list(tokenize(doc))

    benchmark(lex_all)


@pytest.mark.benchmark(group="lex-corpus")
def test_benchmark_pygments(benchmark, contract_corpus):
    """Benchmark Pygments on the contract corpus."""
    lexers = pytest.importorskip("pygments.lexers.solidity")
    lexer = lexers.SolidityLexer()

    def lex_all():
        for doc in contract_corpus:
            list(lexer.get_tokens(doc))

    benchmark(lex_all)


@pytest.mark.benchmark(group="lex-large-file")
def test_benchmark_solex_large_file(benchmark, large_contract):
    """Benchmark solex on one ~100KB file."""
    from solex import tokenize

    benchmark(lambda: list(tokenize(large_contract)))


@pytest.mark.benchmark(group="lex-large-file")
def test_benchmark_pygments_large_file(benchmark, large_contract):
    """Benchmark Pygments on one ~100KB file."""
    lexers = pytest.importorskip("pygments.lexers.solidity")
    lexer = lexers.SolidityLexer()

    benchmark(lambda: list(lexer.get_tokens(large_contract)))


@pytest.mark.benchmark(group="lex-adversarial")
def test_benchmark_solex_adversarial(benchmark, adversarial_sources):
    """Pathological inputs stay linear."""
    from solex import tokenize

    def lex_all():
        for doc in adversarial_sources:
            list(tokenize(doc))

    benchmark(lex_all)


if __name__ == "__main__":
    main()
