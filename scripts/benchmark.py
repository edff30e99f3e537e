#!/usr/bin/env python3
"""
RedStore Performance Benchmarks

Measures dispatch throughput of the store and renders the results with rich.

Usage:
    python scripts/benchmark.py               # Run all benchmarks
    python scripts/benchmark.py --config      # Show current benchmark configuration
    python scripts/benchmark.py --dispatches 50000 --max-listeners 5000

Configuration:
    Adjust the constants at the top of the file, or override them with flags.
"""

import argparse
import time
from dataclasses import dataclass
from typing import Callable, List

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from redstore import combine_reducers, create_store

# Configuration constants - adjust these to change benchmark behavior
DISPATCHES_PER_RUN = 10000  # Dispatches timed for each workload
STARTING_LISTENERS = 1  # Listener count of the first fan-out workload
MAX_LISTENERS = 1000  # Largest fan-out workload
SCALE_FACTOR = 10  # How much to multiply the listener count each iteration
SLICE_COUNT = 16  # Slices in the combined-reducer workload


@dataclass
class BenchmarkResult:
    name: str
    workload: str
    dispatches: int
    elapsed: float

    @property
    def operations_per_second(self) -> float:
        return self.dispatches / self.elapsed if self.elapsed > 0 else float("inf")

    @property
    def latency_us(self) -> float:
        return (self.elapsed / self.dispatches) * 1e6 if self.dispatches else 0.0


def _counter(state, action):
    if state is None:
        state = 0
    if action["type"] == "INCREMENT":
        return state + 1
    return state


def _time_dispatches(store, dispatches: int) -> float:
    action = {"type": "INCREMENT"}
    dispatch = store.dispatch
    start = time.perf_counter()
    for _ in range(dispatches):
        dispatch(action)
    return time.perf_counter() - start


def bench_fanout(listeners: int, dispatches: int) -> BenchmarkResult:
    """Dispatch to a store with ``listeners`` no-op listeners."""
    store = create_store(_counter)
    for _ in range(listeners):
        store.subscribe(lambda: None)
    elapsed = _time_dispatches(store, dispatches)
    return BenchmarkResult(
        "Listener fan-out", f"{listeners} listeners", dispatches, elapsed
    )


def bench_combined(slices: int, dispatches: int) -> BenchmarkResult:
    """Dispatch through a reducer combined from ``slices`` counters."""
    reducer = combine_reducers({f"slice_{i}": _counter for i in range(slices)})
    store = create_store(reducer)
    elapsed = _time_dispatches(store, dispatches)
    return BenchmarkResult("Combined reducer", f"{slices} slices", dispatches, elapsed)


def bench_subscription_churn(dispatches: int) -> BenchmarkResult:
    """Subscribe and unsubscribe around every dispatch."""
    store = create_store(_counter)
    action = {"type": "INCREMENT"}
    start = time.perf_counter()
    for _ in range(dispatches):
        unsubscribe = store.subscribe(lambda: None)
        store.dispatch(action)
        unsubscribe()
    elapsed = time.perf_counter() - start
    return BenchmarkResult(
        "Subscription churn", "1 listener per dispatch", dispatches, elapsed
    )


class RedStoreBenchmark:
    """Rich-formatted display for redstore benchmarking."""

    def __init__(self, dispatches: int, max_listeners: int, quiet: bool = False):
        self.console = Console()
        self.dispatches = dispatches
        self.max_listeners = max_listeners
        self.quiet = quiet
        self.results: List[BenchmarkResult] = []

    def run_benchmarks(self):
        """Run all benchmarks and display results."""
        start_time = time.time()
        self._display_header()

        listeners = STARTING_LISTENERS
        while listeners <= self.max_listeners:
            self._run(lambda n=listeners: bench_fanout(n, self.dispatches))
            listeners *= SCALE_FACTOR

        self._run(lambda: bench_combined(SLICE_COUNT, self.dispatches))
        self._run(lambda: bench_subscription_churn(self.dispatches))

        self._display_final_results(start_time)

    def _run(self, bench: Callable[[], BenchmarkResult]):
        result = bench()
        self.results.append(result)
        if not self.quiet:
            self.console.print(
                f"[green]✓[/green] {result.name} ({result.workload}): "
                f"{result.operations_per_second:,.0f} dispatches/sec"
            )

    def _display_header(self):
        header = Panel(
            Align.center("RedStore Dispatch Benchmark"),
            title="RedStore Benchmarks",
            border_style="blue",
        )
        self.console.print(header)
        self.console.print()

    def _display_final_results(self, start_time: float):
        elapsed = time.time() - start_time

        table = Table(title="Final Benchmark Results")
        table.add_column("Benchmark", style="cyan", no_wrap=True)
        table.add_column("Workload", style="magenta")
        table.add_column("Throughput", style="green", justify="right")
        table.add_column("Latency", style="yellow", justify="right")

        for result in self.results:
            table.add_row(
                result.name,
                result.workload,
                f"{result.operations_per_second / 1000:.1f}K dispatches/sec",
                f"{result.latency_us:.2f}μs",
            )

        self.console.print()
        self.console.print(table)
        self.console.print()
        self.console.print(f"[dim]Benchmark completed in {elapsed:.2f} seconds[/dim]")


def show_config(console: Console):
    """Print the benchmark configuration."""
    table = Table(title="Benchmark Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta", justify="right")
    table.add_row("DISPATCHES_PER_RUN", str(DISPATCHES_PER_RUN))
    table.add_row("STARTING_LISTENERS", str(STARTING_LISTENERS))
    table.add_row("MAX_LISTENERS", str(MAX_LISTENERS))
    table.add_row("SCALE_FACTOR", str(SCALE_FACTOR))
    table.add_row("SLICE_COUNT", str(SLICE_COUNT))
    console.print(table)


def main():
    """Main entry point for the benchmark script."""
    parser = argparse.ArgumentParser(description="RedStore Performance Benchmarks")
    parser.add_argument(
        "--config", action="store_true", help="Show current benchmark configuration"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output, show only final results",
    )
    parser.add_argument(
        "--dispatches",
        type=int,
        default=DISPATCHES_PER_RUN,
        help="Dispatches timed per workload",
    )
    parser.add_argument(
        "--max-listeners",
        type=int,
        default=MAX_LISTENERS,
        help="Largest listener fan-out to measure",
    )
    args = parser.parse_args()

    if args.config:
        show_config(Console())
        return

    RedStoreBenchmark(args.dispatches, args.max_listeners, args.quiet).run_benchmarks()


if __name__ == "__main__":
    main()
