"""Command-line entry point: ``completions``, ``search`` and ``fetch`` commands."""

from __future__ import annotations

import argparse
import logging

from triecomplete import bench
from triecomplete.constants import BENCH_ITERATIONS, BENCH_WARMUP, DEFAULT_WORD_LIST
from triecomplete.dictionary import Dictionary
from triecomplete.wordlist import fetch_word_list

log = logging.getLogger("triecomplete")

_NOUNS = {"completions": "completions", "search": "words"}


def run_query(dictionary: Dictionary, command: str, prefix: str) -> list[str]:
    """Print every result of ``command`` for ``prefix``, one per line."""
    if command == "completions":
        results = dictionary.completions(prefix)
    else:
        results = dictionary.search(prefix)

    for r in results:
        print(r)
    print(f"Found {len(results)} {_NOUNS[command]}")
    return results


def run_benchmark(
    dictionary: Dictionary,
    command: str,
    prefix: str,
    iterations: int = BENCH_ITERATIONS,
    warmup: int = BENCH_WARMUP,
) -> bench.BenchResult:
    """Benchmark ``command`` for ``prefix`` and print the stats table."""
    print(f"Benchmarking {command} for {prefix!r} ({warmup} warmup, {iterations} runs)...\n")
    if command == "completions":
        result = bench.bench_completions(dictionary, prefix, iterations, warmup)
    else:
        result = bench.bench_search(dictionary, prefix, iterations, warmup)

    print(bench.format_result(result))
    print(f"\nFound {result.result_count} {_NOUNS[command]}")
    return result


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="triecomplete",
        description="Prefix autocompletion over a word list (case insensitive)",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file (one word per line)")
    parser.add_argument("--iterations", type=_positive_int, default=BENCH_ITERATIONS,
                        help="Timed runs per benchmark")
    parser.add_argument("--warmup", type=_non_negative_int, default=BENCH_WARMUP,
                        help="Untimed runs before a benchmark")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for name, help_text in (
        ("completions", "Suffixes completing words that start with PREFIX"),
        ("search", "Words that start with PREFIX"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("prefix", metavar="PREFIX", help="At least 2 characters")
        p.add_argument("--benchmark", action="store_true",
                       help="Print timing/memory stats instead of the results")

    p = sub.add_parser("fetch", help="Download a word list file")
    p.add_argument("--output", "-o", default=DEFAULT_WORD_LIST,
                   help=f"Destination file (default: {DEFAULT_WORD_LIST})")
    p.add_argument("--force", action="store_true",
                   help="Overwrite an existing file")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "fetch":
        try:
            count = fetch_word_list(args.output, force=args.force)
        except RuntimeError as exc:
            log.error("%s", exc)
            return 1
        print(f"{count:,} words in {args.output}")
        return 0

    if args.benchmark:
        dictionary = bench.load(args.dict)
        run_benchmark(dictionary, args.command, args.prefix, args.iterations, args.warmup)
    else:
        dictionary = Dictionary(args.dict)
        log.debug("Querying %s for %r", args.command, args.prefix)
        run_query(dictionary, args.command, args.prefix)
    return 0
