"""
Command-line entry point for the transform benchmark.

Usage:
    radix2-bench [SIGNAL_LENGTH] [--config CONFIG_PATH] [--frequency F]
                 [--head K] [--repeats R] [--log-file PATH] [--output PATH]
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from src.utils.logging import setup_logging
from .config import BenchmarkConfig, load_config
from .runner import TransformTiming, run_benchmark, validate_signal_length


console = Console()


def format_complex(z: complex) -> str:
    return f"{z.real:.6g} + {z.imag:.6g}i"


def display_transform(result: TransformTiming, head: int):
    """Print the leading bins and elapsed time of one transform."""
    console.print(f"[bold]{result.title} results (first {head} elements):[/bold]")
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Bin", justify="right", style="dim")
    table.add_column("Value")
    for i, z in enumerate(result.head):
        table.add_row(str(i), format_complex(z))

    console.print(table)
    console.print(f"Elapsed time ({result.title}): {result.elapsed_s:.6g} seconds\n")


def display_summary_table(results: List[TransformTiming]):
    table = Table(title="Transform Timing Summary", box=box.ROUNDED)
    table.add_column("Transform", style="bold")
    table.add_column("Elapsed (s)", justify="right")
    table.add_column("Max |Δ| vs scipy", justify="right")

    for r in results:
        table.add_row(r.title, f"{r.elapsed_s:.6f}", f"{r.max_error:.2e}")

    console.print(table)


def save_results(results: List[TransformTiming], config: BenchmarkConfig, output_path: Path):
    results_dict = {
        'timestamp': datetime.now().isoformat(),
        'signal_length': config.signal_length,
        'frequency': config.frequency,
        'repeats': config.repeats,
        'transforms': [r.to_dict() for r in results],
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(results_dict, f, indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Time the naive DFT, recursive FFT and in-place iterative FFT"
    )
    parser.add_argument(
        'signal_length',
        type=int,
        nargs='?',
        default=None,
        help='Signal length (must be a power of 2)'
    )
    parser.add_argument('--config', type=str, default=None, help='Path to configuration file')
    parser.add_argument('--frequency', type=float, default=None, help='Sine frequency in cycles per signal')
    parser.add_argument('--head', type=int, default=None, help='Number of leading bins to print')
    parser.add_argument('--repeats', type=int, default=None, help='Timed runs per transform')
    parser.add_argument('--log-file', type=str, default=None, help='Append detailed logs to this file')
    parser.add_argument('--output', type=str, default=None, help='Write results as JSON')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config).override(
            signal_length=args.signal_length,
            frequency=args.frequency,
            head=args.head,
            repeats=args.repeats,
            log_file=args.log_file,
        )
    except (OSError, ValueError) as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        return 1

    logger = setup_logging(log_file=config.log_file, level=logging.INFO, name='src')
    logger.info(f"Configuration: {config.to_dict()}")

    try:
        validate_signal_length(config.signal_length)
    except ValueError as e:
        # File only; rich prints the user-facing message
        logger.info(f"Rejected signal length {config.signal_length}")
        console.print(f"[bold red]{e}[/bold red]")
        return 1

    console.print(Panel.fit(
        "[bold blue]Radix-2 FFT Benchmark[/bold blue]\n"
        f"N = {config.signal_length}, frequency = {config.frequency}",
        border_style="blue"
    ))

    try:
        results = run_benchmark(config)
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise

    for r in results:
        display_transform(r, config.head)
    display_summary_table(results)

    if args.output:
        output_path = Path(args.output)
        save_results(results, config, output_path)
        console.print(f"\n[green]✓[/green] Results saved to {output_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
