"""
Unified CLI argument parsing for examples.
"""
import argparse
import sys
from pathlib import Path
from typing import Optional, List

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


def build_parser(description: str) -> argparse.ArgumentParser:
    """Build a standard ArgumentParser with common flags."""
    parser = argparse.ArgumentParser(description=description)

    parser.add_argument(
        "--config-dir",
        type=str,
        default=str(DEFAULT_CONFIG_DIR),
        help="Directory holding <Section>.json configuration files (default: examples/config)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the luthier loggers (default: INFO)"
    )
    parser.add_argument(
        "--outdir",
        type=str,
        default="./_outputs",
        help="Directory to save output files (default: ./_outputs relative to execution)"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json"],
        default="json",
        help="Output format (default: json)"
    )

    return parser


def parse_args(description: str, argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse arguments for an example script."""
    parser = build_parser(description)
    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(argv)
