from __future__ import annotations

import math
import os
from typing import Any, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from crackbench.domain.models import ResultRecord


def get_cpu_budget() -> Optional[str]:
    """
    CPUs available to this process, honoring a cgroup v2 quota when present.
    """
    try:
        with open("/sys/fs/cgroup/cpu.max", "r") as f:
            parts = f.read().strip().split()
        if len(parts) == 2 and parts[0] != "max":
            return f"{int(parts[0]) / int(parts[1]):.1f}"
    except (FileNotFoundError, PermissionError, ValueError):
        pass
    count = os.cpu_count()
    return str(count) if count else None


def _fmt_throughput(value: float) -> str:
    return "∞" if math.isinf(value) else f"{value:,.2f}"


def print_records(records: Sequence[ResultRecord], console: Optional[Console] = None) -> None:
    """
    Render individual benchmark records in production order.
    """
    console = console or Console()

    if not records:
        console.print("[yellow]No results to display.[/yellow]")
        return

    table = Table(title="Search Runs", box=box.ROUNDED)
    table.add_column("Run", justify="right", style="blue")
    table.add_column("Algorithm", style="cyan", no_wrap=True)
    table.add_column("Target", style="magenta")
    table.add_column("Workers", justify="right")
    table.add_column("Found", justify="center")
    table.add_column("Time (s)", justify="right", style="green")
    table.add_column("Guesses/s", justify="right", style="bold green")
    table.add_column("Mem Δ (MB)", justify="right", style="yellow")

    for record in records:
        table.add_row(
            str(record.run_id),
            record.algorithm_type.value,
            record.target,
            str(record.worker_count),
            "✓" if record.found else "✗",
            f"{record.elapsed_seconds:.4f}",
            _fmt_throughput(record.throughput),
            f"{record.memory_delta_mb:.3f}",
        )

    console.print(table)


def print_summary(summary: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render per-configuration statistics, best median throughput first.
    """
    console = console or Console()

    if not summary:
        console.print("[yellow]No results to display.[/yellow]")
        return

    title = "Crack Benchmark Summary"
    cpus = get_cpu_budget()
    if cpus:
        title = f"{title}\n[dim]Available CPUs: {cpus}[/dim]"

    table = Table(title=title, box=box.ROUNDED, caption="Sorted by Throughput (descending)")
    table.add_column("Algorithm", style="cyan", no_wrap=True)
    table.add_column("Workers", justify="right", style="magenta")
    table.add_column("Runs", justify="right", style="blue")
    table.add_column("Found", justify="right")
    table.add_column("Time (s)\n[dim](Median ± StdDev)[/dim]", justify="right", style="green")
    table.add_column("Guesses/s\n[dim](Median)[/dim]", justify="right", style="bold green")
    table.add_column("Mem Δ (MB)\n[dim](Median)[/dim]", justify="right", style="yellow")

    ordered = sorted(summary, key=lambda s: s["throughput"]["median"], reverse=True)
    for entry in ordered:
        elapsed = entry["elapsed_seconds"]
        table.add_row(
            entry["algorithm_type"],
            str(entry["worker_count"]),
            str(entry["runs"]),
            f"{entry['found']}/{entry['runs']}",
            f"{elapsed['median']:.4f} ± {elapsed['stddev']:.4f}",
            _fmt_throughput(entry["throughput"]["median"]),
            f"{entry['memory_delta_mb']['median']:.3f}",
        )

    console.print(table)


__all__ = ["get_cpu_budget", "print_records", "print_summary"]
