# tools/profile_search.py
"""
Small profiling harness for SearchIndex.search.
Usage:
  python tools/profile_search.py data/glossary.json --warm 100 --iters 1000 --query "main mem"

Prints index build time and mean/median/stdev latency per keystroke prefix of the query.
"""
import argparse
import statistics
import time

from glossary_browser.core.glossary import Glossary
from glossary_browser.loader import load_glossary


def keystrokes(query):
    """'cpu' -> ['c', 'cp', 'cpu'], what a user sends while typing."""
    return [query[:i] for i in range(1, len(query) + 1)]


def benchmark(glossary, queries, iterations=200):
    times = []
    for _ in range(iterations):
        for q in queries:
            t0 = time.perf_counter()
            _ = glossary.index.search(q)
            t1 = time.perf_counter()
            times.append((t1 - t0) * 1000.0)  # ms
    return times


def summarize(times):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "stdev_ms": statistics.pstdev(times_sorted),
        "p90_ms": times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)],
        "max_ms": times_sorted[-1],
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("data", nargs="?", default="data/glossary.json", help="glossary JSON file")
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--query", type=str, default="main memory", help="query typed one key at a time")
    args = parser.parse_args()

    entries, category_order = load_glossary(args.data)
    glossary = Glossary(entries, category_order)
    stats = glossary.index.stats()
    print(f"Indexed {stats['entries']} entries, {stats['tokens']} tokens in {stats['build_ms']:.3f}ms")

    queries = keystrokes(args.query)
    print("Warming up...")
    benchmark(glossary, queries, iterations=args.warm)

    print("Measuring...")
    s = summarize(benchmark(glossary, queries, iterations=args.iters))
    print("Stats (ms): mean=%.4f median=%.4f stdev=%.4f p90=%.4f max=%.4f" % (
        s["mean_ms"], s["median_ms"], s["stdev_ms"], s["p90_ms"], s["max_ms"],
    ))
    print("Sample search output:", glossary.index.search_ids(args.query)[:5])


if __name__ == "__main__":
    main()
