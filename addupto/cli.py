"""
Sum 1..n Benchmark CLI

Compares an iterative summation with the closed-form n(n + 1) / 2 for a
list of tested values and reports timing differences and consistency.

Usage:
    addupto-bench                              # default tested values
    addupto-bench --values 10,1000,100000
    addupto-bench --config benchmarks/values.yaml
    addupto-bench --numeric float              # double-precision arithmetic
    addupto-bench --output results/            # also write JSON/Markdown/PNG
"""
import argparse
import logging
import time
from pathlib import Path
from typing import List, Optional

from .benchmark import BenchmarkRunner, ReportGenerator
from .config import (
    BenchmarkConfig,
    ConfigurationError,
    NumericMode,
    Settings,
    load_config,
    parse_values,
)
from .display import Colors, colored, print_error, print_record, print_success, print_summary
from .visualization import TimingChartGenerator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="addupto-bench",
        description="Iterative vs. closed-form summation benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s                                   Default tested values
  %(prog)s --values 1,10,100                 Custom values
  %(prog)s --config benchmarks/values.yaml   Values from YAML
  %(prog)s --numeric float --output results  Double precision, with reports
""",
    )

    # --- Values ---
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--values",
        help="Comma-separated tested values (default: 1 … 9000000000)",
    )
    source.add_argument(
        "--config", type=Path, metavar="FILE",
        help="YAML configuration file with a 'values' list",
    )

    # --- Options ---
    opts = parser.add_argument_group("Options")
    opts.add_argument(
        "--numeric", choices=[m.value for m in NumericMode], default=None,
        help="Numeric representation (default: exact)",
    )
    opts.add_argument(
        "--output", "-o", type=Path, metavar="DIR",
        help="Write JSON, Markdown and PNG reports to DIR",
    )
    opts.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    opts.add_argument("--verbose", "-v", action="store_true",
                      help="Verbose output with debug logging")

    return parser


def _build_config(args: argparse.Namespace) -> BenchmarkConfig:
    if args.values is not None:
        config = BenchmarkConfig(values=parse_values(args.values))
    else:
        config = load_config(args.config)
    if args.numeric:
        config = config.with_mode(args.numeric)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings.from_env()
    color = settings.color and not args.no_color

    # --- Logging ---
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger = logging.getLogger(__name__)

    try:
        config = _build_config(args)
    except ConfigurationError as e:
        print_error(str(e), color)
        return 1

    logger.debug(f"Tested values: {config.values} ({config.numeric_mode.value})")

    # --- Run ---
    runner = BenchmarkRunner(config)
    t0 = time.perf_counter()
    runner.run(on_record=lambda record: print_record(record, color))
    duration = time.perf_counter() - t0

    # --- Reports ---
    if args.output:
        summary = runner.aggregate_results(duration)
        print_summary(summary, color)

        reporter = ReportGenerator(args.output)
        paths = [reporter.save_json(summary), reporter.generate_markdown(summary)]
        chart = TimingChartGenerator().plot_timings(summary, args.output / "benchmark_timings.png")
        if chart is not None:
            paths.append(chart)

        print("\n  Reports saved to:")
        for path in paths:
            print_success(str(path), color)

    return 0


def run() -> int:
    """Console-script entry point."""
    try:
        return main()
    except KeyboardInterrupt:
        color = Settings.from_env().color
        print(f"\n{colored('Benchmark interrupted by user.', Colors.YELLOW, color)}")
        return 130
