"""Micro-benchmarks for the comment parser and Java generator."""

from __future__ import annotations

import time

from enumgen.codegen.java import generate_source
from enumgen.javadoc.parser import parse_entries


def synthetic_comment(entries: int) -> str:
    seps = ["-", ":", "：", " = ", " - "]
    lines = [f" * {i}{seps[i % len(seps)]}状态 {i} state。" for i in range(entries)]
    return "/**\n" + "\n".join(lines) + "\n */"


def benchmark_parse(entries: int = 5000, runs: int = 3) -> dict[str, float]:
    text = synthetic_comment(entries)
    best = None
    parsed = []
    for _ in range(runs):
        start = time.perf_counter()
        parsed = parse_entries(text)
        elapsed = time.perf_counter() - start
        best = elapsed if best is None or elapsed < best else best
    start = time.perf_counter()
    source = generate_source("com.example", "BenchEnum", parsed)
    generate_seconds = time.perf_counter() - start
    return {
        "entries": len(parsed),
        "chars": len(text),
        "best_parse_seconds": best or 0.0,
        "generate_seconds": generate_seconds,
        "source_chars": len(source),
    }


if __name__ == "__main__":
    for size in (500, 5000, 50000):
        print(benchmark_parse(entries=size))
