"""
Example 01: Registering custom factories next to the defaults.

Goal:
    Show the builder's merge and replace semantics, a custom metric maker
    factory, and what happens when a deliberately unsupported backend or a
    dependency cycle is requested.

Usage:
    python examples/basic/01_custom_factories.py
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io
from luthier import FunctionFactory, IndustrialPark, LuthierError, configure_logging
from luthier.entities import MetricMaker


class RatioMaker(MetricMaker):
    """Builds ratio metrics from exactly two dependent metrics."""

    def make(self, metric_name, dependent_metrics):
        numerator, denominator = dependent_metrics
        return {"name": metric_name, "expression": f"{numerator} / {denominator}"}


def build_ratio_maker(name, config, park):
    return RatioMaker(name)


def build_linked_store(name, config, park):
    # 通过 park 按名称解析另一个存储，用于演示循环依赖检测
    park.get_key_value_store(config["linkedTo"])
    raise LuthierError("unreachable for cyclic configuration")


TREE = {
    "MetricMakerConfig": {"ratio": {"type": "ratio"}},
    "KeyValueStoreConfig": {
        "cache": {"type": "redis"},
        "left": {"type": "linked", "linkedTo": "right"},
        "right": {"type": "linked", "linkedTo": "left"},
    },
}


def main(argv=None):
    args = cli.parse_args("Custom factory registration", argv)
    configure_logging(args.log_level)

    builder = (
        IndustrialPark.Builder(config=TREE)
        .add_factories("metricMaker", {"ratio": FunctionFactory(build_ratio_maker)})
        .add_factory("keyValueStore", "linked", FunctionFactory(build_linked_store))
    )
    registered = {concept: sorted(builder.factories(concept)) for concept in ("metricMaker", "keyValueStore")}
    park = builder.build()

    ratio = park.get_metric_maker("ratio").make("conversion", ["orders", "visits"])

    errors = {}
    for name in ("cache", "left"):
        try:
            park.get_key_value_store(name)
        except LuthierError as exc:
            errors[name] = f"{type(exc).__name__}: {exc}"

    result = {
        "name": "basic/01_custom_factories",
        "config": {"registered": registered},
        "entities": park.snapshot()["built"],
        "outputs": {"ratio": ratio, "errors": errors},
        "artifacts": {},
    }
    out_path = io.write_json(result, Path(args.outdir) / "01_custom_factories.json")
    result["artifacts"]["json"] = str(out_path)
    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
    for name, message in res["outputs"]["errors"].items():
        print(f"{name}: {message}")
