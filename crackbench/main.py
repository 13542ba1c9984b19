from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import List, Optional

import typer

from crackbench.aggregator import summarize
from crackbench.config import ConfigurationError, get_settings
from crackbench.domain.candidates import random_target
from crackbench.domain.models import AlgorithmType
from crackbench.infrastructure.csv_store import results_filename
from crackbench.infrastructure.s3_upload import UploadConfig, persist_and_upload
from crackbench.orchestrator import available_searchers, make_config, run_modes
from crackbench.reporter import print_records, print_summary
from crackbench.utils.logging import configure_logging

app = typer.Typer(help="Sequential vs. concurrent brute-force search benchmark.")

MODES = {
    "sequential": [AlgorithmType.SEQUENTIAL],
    "concurrent": [AlgorithmType.CONCURRENT],
    "both": [AlgorithmType.SEQUENTIAL, AlgorithmType.CONCURRENT],
}


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"length={settings.password_length} runs={settings.benchmark_runs} "
        f"workers={settings.worker_count} backend={settings.search_backend} | "
        f"results={settings.results_dir} | s3=s3://{settings.s3_bucket} ({settings.aws_region})"
    )


@app.command("list")
def list_searchers() -> None:
    """
    List available searchers.
    """
    typer.echo("Available searchers: " + ", ".join(available_searchers()))


@app.command()
def run(
    mode: str = typer.Option(
        "both",
        "--mode",
        "-m",
        help="Searchers to run: sequential, concurrent or both.",
    ),
    length: Optional[int] = typer.Option(
        None, "--length", "-l", help="Password length in digits (default from settings)."
    ),
    runs: Optional[int] = typer.Option(
        None, "--runs", "-r", help="Repetitions per target (default from settings)."
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", help="Workers for the concurrent searcher (default: CPU count)."
    ),
    targets: Optional[List[str]] = typer.Option(
        None,
        "--target",
        "-t",
        help="Secret to search for; repeat for several. Defaults to one random secret.",
    ),
    backend: Optional[str] = typer.Option(
        None, "--backend", "-b", help="Concurrent backend: process or thread."
    ),
    results_dir: Optional[Path] = typer.Option(
        None, "--results-dir", help="Directory for the CSV export (default from settings)."
    ),
    upload: bool = typer.Option(False, "--upload/--no-upload", help="Upload the CSV to S3."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random target."),
    json_logs: Optional[bool] = typer.Option(None, "--json-logs/--text-logs", help="Log format."),
) -> None:
    """
    Benchmark the selected searchers and export the results.
    """
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        json_logs=settings.json_logs if json_logs is None else json_logs,
    )

    try:
        if mode not in MODES:
            raise ConfigurationError(f"Unknown mode '{mode}'. Choose from: {', '.join(MODES)}")
        config = make_config(
            password_length=settings.password_length if length is None else length,
            worker_count=settings.worker_count if workers is None else workers,
            backend=backend or settings.search_backend,
        )
        repetitions = settings.benchmark_runs if runs is None else runs
        if not targets:
            targets = [random_target(config.password_length, random.Random(seed))]
            typer.echo(f"No target given. Using random password for all runs: {targets[0]}")

        kinds = MODES[mode]
        typer.echo(
            f"Running mode='{mode}' length={config.password_length} "
            f"(space={config.search_space:,}) runs={repetitions} workers={config.worker_count} "
            f"backend={config.backend}."
        )
        records = run_modes(config, targets, repetitions, kinds)
    except ConfigurationError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    except KeyboardInterrupt as exc:
        # Caught here: click's standalone mode would turn it into "Aborted!" with exit 1.
        typer.echo("Cancelled by user.", err=True)
        raise typer.Exit(code=130) from exc

    print_records(records)
    print_summary(summarize(records))

    upload_config = None
    if upload:
        upload_config = UploadConfig(
            bucket=settings.s3_bucket,
            region=settings.aws_region,
            access_key_id=settings.aws_access_key_id,
            secret_access_key=settings.aws_secret_access_key,
        )
    out_dir = results_dir or Path(settings.results_dir)
    persist_and_upload(records, out_dir / results_filename(kinds, config.worker_count), upload_config)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
