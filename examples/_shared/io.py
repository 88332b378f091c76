"""
Input/Output helpers for examples.
"""
from pathlib import Path
from typing import Any, Dict, Union

from luthier.core.utils import serialize_to_json


def ensure_outdir(path: Union[str, Path]) -> Path:
    """Ensure the output directory exists."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def write_json(data: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write data to a JSON file using the library serializer."""
    p = Path(path)
    ensure_outdir(p.parent)
    p.write_text(serialize_to_json(data, indent=2), encoding="utf-8")
    return p


def print_summary(result: Dict[str, Any]) -> None:
    """
    Print a summary of the example result to stdout.

    Expects result dict to have keys: 'name', 'config', 'entities', 'artifacts'.
    """
    print("=" * 60)
    print(f"EXAMPLE: {result.get('name', 'Unknown')}")
    print("-" * 60)

    if "config" in result:
        print("Config:")
        for k, v in result["config"].items():
            print(f"  {k}: {v}")

    if result.get("entities"):
        print("-" * 60)
        print("Built entities:")
        for concept, names in result["entities"].items():
            if names:
                print(f"  {concept}: {', '.join(names)}")

    if result.get("availability"):
        print("-" * 60)
        print("Availability:")
        for table, intervals in result["availability"].items():
            print(f"  {table}: {intervals}")

    if result.get("artifacts"):
        print("-" * 60)
        print("Artifacts:")
        for k, v in result["artifacts"].items():
            print(f"  {k}: {v}")

    print("=" * 60)
