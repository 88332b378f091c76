"""Built-in factories for every concept type."""
from .dimension import KeyValueStoreDimensionFactory
from .key_value_store import MapKeyValueStoreFactory
from .physical_table import (
    PermissivePhysicalTableFactory,
    PhysicalTableParams,
    SingleDataSourcePhysicalTableFactory,
    StrictPhysicalTableFactory,
)
from .search_provider import NoOpSearchProviderFactory, ScanSearchProviderFactory
from .defaults import (
    default_dimension_factories,
    default_factories,
    default_key_value_store_factories,
    default_physical_table_factories,
    default_search_provider_factories,
)

__all__ = [
    "KeyValueStoreDimensionFactory",
    "MapKeyValueStoreFactory",
    "PermissivePhysicalTableFactory",
    "PhysicalTableParams",
    "SingleDataSourcePhysicalTableFactory",
    "StrictPhysicalTableFactory",
    "NoOpSearchProviderFactory",
    "ScanSearchProviderFactory",
    "default_dimension_factories",
    "default_factories",
    "default_key_value_store_factories",
    "default_physical_table_factories",
    "default_search_provider_factories",
]
