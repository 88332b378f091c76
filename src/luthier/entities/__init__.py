"""In-process entity implementations produced by the built-in factories."""

from .availability import IntervalSet
from .dimension import Dimension, KeyValueStoreDimension
from .key_value_store import KeyValueStore, MapStore
from .metadata import DataSourceMetadataService
from .metric_maker import MetricMaker
from .physical_table import (
    Column,
    ConfigPhysicalTable,
    DimensionColumn,
    MetricColumn,
    PermissivePhysicalTable,
    StrictPhysicalTable,
)
from .search_provider import NoOpSearchProvider, ScanSearchProvider, SearchProvider
from .time_grain import TimeGrain

__all__ = [
    "IntervalSet",
    "Dimension",
    "KeyValueStoreDimension",
    "KeyValueStore",
    "MapStore",
    "DataSourceMetadataService",
    "MetricMaker",
    "Column",
    "ConfigPhysicalTable",
    "DimensionColumn",
    "MetricColumn",
    "PermissivePhysicalTable",
    "StrictPhysicalTable",
    "NoOpSearchProvider",
    "ScanSearchProvider",
    "SearchProvider",
    "TimeGrain",
]
