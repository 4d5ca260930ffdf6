"""Benchmark CLI -- measures classification throughput."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.table import Table

from .config import settings
from .media.classifier import TypeClassifier

console = Console()

COMMON_TYPES = [
    "application/json",
    "application/x-www-form-urlencoded",
    "text/html",
    "text/plain",
    "multipart/form-data",
    "image/png",
    "image/jpeg",
    "application/xml",
]

TYPES_WITH_PARAMS = [
    "application/json; charset=utf-8",
    "text/html; charset=utf-8",
    "text/plain; charset=iso-8859-1",
    "multipart/form-data; boundary=----WebKitFormBoundary",
]

TYPE_CHECKS = ["json", "html", "text/*", "image/*", "urlencoded", "multipart", "+json"]


@dataclass
class FakeRequest:
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class BenchResult:
    name: str
    duration_ms: float
    iterations: int

    @property
    def ops_per_sec(self) -> float:
        return self.iterations / self.duration_ms * 1000 if self.duration_ms else float("inf")

    @property
    def us_per_op(self) -> float:
        return self.duration_ms / self.iterations * 1000


def _request(content_type: str) -> FakeRequest:
    return FakeRequest({"content-type": content_type, "transfer-encoding": "chunked"})


def bench(name: str, fn: Callable[[], Any], iterations: int) -> BenchResult:
    start = time.perf_counter_ns()
    for _ in range(iterations):
        fn()
    elapsed = time.perf_counter_ns() - start
    return BenchResult(name=name, duration_ms=elapsed / 1_000_000, iterations=iterations)


def _cycler(fn: Callable[[Any], Any], items: list[Any]) -> Callable[[], Any]:
    state = {"i": 0}

    def _step() -> Any:
        item = items[state["i"] % len(items)]
        state["i"] += 1
        return fn(item)

    return _step


def run_benchmarks(classifier: TypeClassifier, iterations: int) -> list[BenchResult]:
    """Run every scenario against *classifier* and return the timings."""
    requests = [_request(t) for t in COMMON_TYPES]
    param_requests = [_request(t) for t in TYPES_WITH_PARAMS]
    actuals = ["application/json", "text/html", "application/vnd.api+json"]

    scenarios: list[tuple[str, Callable[[], Any]]] = [
        ("common types", _cycler(lambda r: classifier.classify_request(r, TYPE_CHECKS), requests)),
        ("types with parameters", _cycler(lambda r: classifier.classify_request(r, TYPE_CHECKS), param_requests)),
        ("classify bare value", _cycler(lambda t: classifier.classify(t, ["json", "html"]), COMMON_TYPES)),
        ("normalize", _cycler(classifier.normalize, TYPE_CHECKS)),
        ("match", _cycler(lambda a: classifier.match("*/*+json", a), actuals)),
    ]
    return [bench(name, fn, iterations) for name, fn in scenarios]


def _render(results: list[BenchResult], classifier: TypeClassifier, show_stats: bool) -> None:
    table = Table(title="typeis benchmark")
    table.add_column("Scenario")
    table.add_column("Total (ms)", justify="right")
    table.add_column("Ops/sec", justify="right")
    table.add_column("µs/op", justify="right")
    for r in results:
        table.add_row(r.name, f"{r.duration_ms:.2f}", f"{r.ops_per_sec:,.0f}", f"{r.us_per_op:.3f}")
    console.print(table)

    if show_stats:
        stats = Table(title="cache stats")
        for col in ("Cache", "Size", "Capacity", "Hits", "Misses"):
            stats.add_column(col, justify="left" if col == "Cache" else "right")
        for s in classifier.cache_stats():
            stats.add_row(s.name, str(s.size), str(s.capacity), str(s.hits), str(s.misses))
        console.print(stats)


def main(argv: list[str] | None = None) -> None:
    cfg = settings.cfg
    parser = argparse.ArgumentParser(description="Benchmark content-type classification")
    parser.add_argument(
        "--iterations",
        type=int,
        default=100_000,
        help="Iterations per scenario (default: 100000)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print cache sizes and hit counts after the run",
    )
    parser.add_argument(
        "--log-level",
        default=cfg.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: TYPEIS_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)
    if args.iterations <= 0:
        parser.error("--iterations must be positive")

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    classifier = TypeClassifier.from_settings(cfg)
    results = run_benchmarks(classifier, args.iterations)
    _render(results, classifier, args.stats)


if __name__ == "__main__":
    main()
