"""
Orchestrator for running benchmark searches, profiling them and collecting results.

Usage (example from CLI):
    from crackbench.orchestrator import make_config, run_benchmark

    config = make_config(password_length=4, worker_count=4)
    records = run_benchmark(config, targets=["0042"], repetitions=3, searcher_kind="concurrent")

Records come back in production order: run-major, then target-minor. Nothing is
persisted here; hand the list to `crackbench.infrastructure`.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Literal, Sequence, Union

from pydantic import BaseModel, Field, ValidationError

from crackbench.aggregator import aggregate
from crackbench.config import ConfigurationError
from crackbench.domain.candidates import search_space_size
from crackbench.domain.models import AlgorithmType, ResultRecord
from crackbench.strategies.abstract import SearchStrategy
from crackbench.strategies.concurrent import ConcurrentStrategy
from crackbench.strategies.sequential import SequentialStrategy
from crackbench.utils.logging import get_logger
from crackbench.utils.profiler import profile_block

log = get_logger(__name__)

SearcherKind = Union[str, AlgorithmType]


class BenchmarkConfig(BaseModel):
    """
    Validated parameters shared by every search in a benchmark session.
    """

    password_length: int = Field(..., ge=1, description="Digits per secret.")
    worker_count: int = Field(1, ge=1, description="Workers for the concurrent searcher.")
    backend: Literal["process", "thread"] = Field("process", description="Concurrent backend.")

    model_config = {"frozen": True}

    @property
    def search_space(self) -> int:
        return search_space_size(self.password_length)


def make_config(password_length: int, worker_count: int = 1, backend: str = "process") -> BenchmarkConfig:
    """Build a BenchmarkConfig, reporting invalid values as ConfigurationError."""
    try:
        return BenchmarkConfig(
            password_length=password_length, worker_count=worker_count, backend=backend
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid benchmark configuration: {exc}") from exc


def validate_targets(targets: Sequence[str], password_length: int) -> List[str]:
    """
    Check every target is a digit string exactly `password_length` long.
    """
    checked = list(targets)
    if not checked:
        raise ConfigurationError("At least one target is required.")
    for target in checked:
        if not (target.isascii() and target.isdigit()) or len(target) != password_length:
            raise ConfigurationError(
                f"Target '{target}' must be exactly {password_length} digits."
            )
    return checked


def _strategy_factories(config: BenchmarkConfig) -> Dict[str, Callable[[], SearchStrategy]]:
    """Registry of available searchers."""
    return {
        "sequential": lambda: SequentialStrategy(),
        "concurrent": lambda: ConcurrentStrategy(config.worker_count, backend=config.backend),
    }


def available_searchers() -> List[str]:
    """List available searcher names."""
    return sorted(_strategy_factories(BenchmarkConfig(password_length=1)).keys())


def _kind_name(kind: SearcherKind) -> str:
    if isinstance(kind, AlgorithmType):
        return kind.name.lower()
    return kind.lower()


def _resolve_strategy(kind: SearcherKind, config: BenchmarkConfig) -> SearchStrategy:
    factories = _strategy_factories(config)
    name = _kind_name(kind)
    if name not in factories:
        raise ConfigurationError(f"Unknown searcher '{kind}'. Available: {', '.join(factories)}")
    return factories[name]()


def run_benchmark(
    config: BenchmarkConfig,
    targets: Sequence[str],
    repetitions: int,
    searcher_kind: SearcherKind,
) -> List[ResultRecord]:
    """
    Run `repetitions` rounds of the selected searcher over every target.

    Parameters
    ----------
    config : BenchmarkConfig
        Password length, worker count and backend.
    targets : sequence[str]
        Secrets to search for, in order. Duplicates are kept.
    repetitions : int
        Number of rounds; each round searches every target once.
    searcher_kind : str | AlgorithmType
        ``"sequential"`` or ``"concurrent"``.

    Returns
    -------
    List[ResultRecord]
        One record per (run, target), run-major then target-minor.

    Raises
    ------
    ConfigurationError
        Raised before any search for bad repetitions, targets or searcher.
    """
    if repetitions < 1:
        raise ConfigurationError(f"repetitions must be >= 1, got {repetitions}")
    checked_targets = validate_targets(targets, config.password_length)
    strategy = _resolve_strategy(searcher_kind, config)
    space = config.search_space

    total_runs = repetitions * len(checked_targets)
    current_run = 0

    log.info(
        f"[SEARCHER START] {strategy.name} ({strategy.worker_count} worker(s), space={space})",
        extra={"searcher": strategy.name, "workers": strategy.worker_count, "space": space},
    )

    records: List[ResultRecord] = []
    for run_id in range(1, repetitions + 1):
        for target in checked_targets:
            current_run += 1
            log.debug(
                f"[RUN {current_run}/{total_runs}] Searching for {target}",
                extra={"searcher": strategy.name, "run": run_id, "target": target},
            )
            with profile_block(strategy.name) as stats:
                outcome = strategy.search(target, config.password_length, space)

            record = aggregate(
                outcome,
                run_id=run_id,
                algorithm_type=strategy.algorithm_type,
                target=target,
                worker_count=strategy.worker_count,
                memory_delta_mb=stats.memory_delta_mb,
            )
            records.append(record)
            log.info(
                f"[RUN {current_run}/{total_runs}] {strategy.name} "
                f"{'found' if outcome.found else 'exhausted without'} {target} "
                f"in {outcome.elapsed_seconds:.4f}s ({record.throughput:,.2f} guesses/s)",
                extra={
                    "searcher": strategy.name,
                    "run": run_id,
                    "target": target,
                    "found": outcome.found,
                    "elapsed_seconds": outcome.elapsed_seconds,
                    "candidates_scanned": outcome.candidates_scanned,
                },
            )

    log.info(
        f"[SEARCHER COMPLETE] {strategy.name}: {len(records)} record(s)",
        extra={"searcher": strategy.name, "records": len(records)},
    )
    return records


def run_modes(
    config: BenchmarkConfig,
    targets: Sequence[str],
    repetitions: int,
    kinds: Iterable[SearcherKind],
) -> List[ResultRecord]:
    """
    Run several searchers back to back and concatenate their records in order.

    All searcher names are resolved before the first search starts.
    """
    kind_list = list(kinds)
    if not kind_list:
        raise ConfigurationError("At least one searcher is required.")
    for kind in kind_list:
        _resolve_strategy(kind, config)

    records: List[ResultRecord] = []
    for kind in kind_list:
        records.extend(run_benchmark(config, targets, repetitions, kind))
    return records


__all__ = [
    "BenchmarkConfig",
    "available_searchers",
    "make_config",
    "run_benchmark",
    "run_modes",
    "validate_targets",
]
