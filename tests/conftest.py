"""Shared pytest configuration and path setup for test modules."""
# 说明：测试公共配置。将 src/ 加入 sys.path，并在每个测试前后恢复全局运行时配置，避免用例之间相互污染。

import dataclasses
import sys
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from luthier.core.utils import get_config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 记录全局配置快照，测试结束后逐字段写回
    cfg = get_config()
    saved = {f.name: getattr(cfg, f.name) for f in dataclasses.fields(cfg)}
    saved["extra"] = dict(saved["extra"])
    yield
    for key, value in saved.items():
        setattr(cfg, key, value)


@pytest.fixture
def sample_tree():
    """Configuration tree with three dimensions and two physical tables."""
    return {
        "DimensionConfig": {
            "country": {"type": "KeyValueStoreDimension", "description": "Country of the visitor"},
            "device": {
                "type": "keyValueStoreDimension",
                "keyValueStore": "deviceStore",
                "searchProvider": "deviceSearch",
                "fields": ["id", "desc", "os"],
            },
            "browser": {"type": "KeyValueStoreDimension", "domain": "shared"},
        },
        "SearchProviderConfig": {
            "country": {"type": "noOp"},
            "deviceSearch": {"type": "scan", "queryWeightLimit": 50},
            "shared": {"type": "NoOpSearchProvider"},
        },
        "KeyValueStoreConfig": {
            "country": {"type": "memory"},
            "deviceStore": {"type": "mapStore", "initial": {"1": {"id": "1", "desc": "phone", "os": "android"}}},
            "shared": {"type": "map"},
        },
        "PhysicalTableConfig": {
            "hourly_visits": {
                "type": "strict",
                "granularity": "hour",
                "dimensions": ["country", "device"],
                "metrics": ["visits"],
                "logicalToPhysicalColumnNames": {"country": "country_code"},
            },
            "daily_visits": {
                "type": "permissivePhysicalTable",
                "tableName": "visits_daily",
                "dimensions": ["country", "browser"],
                "metrics": ["visits", "users"],
            },
        },
    }
