"""Search provider factories."""
# 说明：搜索提供者工厂。实体名即搜索域（domain），多个维度可共享同一 domain 的提供者。

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from luthier.core.factory import Factory
from luthier.entities import NoOpSearchProvider, ScanSearchProvider, SearchProvider

from ._fields import get_field

if TYPE_CHECKING:
    from luthier.core.industrial_park import IndustrialPark


class NoOpSearchProviderFactory(Factory[SearchProvider]):
    """Builds NoOpSearchProvider instances."""

    def build(self, name: str, config: Mapping[str, Any], park: "IndustrialPark") -> SearchProvider:
        return NoOpSearchProvider(name)


class ScanSearchProviderFactory(Factory[SearchProvider]):
    """Builds ScanSearchProvider instances honouring `queryWeightLimit`."""

    def build(self, name: str, config: Mapping[str, Any], park: "IndustrialPark") -> SearchProvider:
        limit = get_field(config, "queryWeightLimit", 100000, expected=(int,), entity=name)
        return ScanSearchProvider(name, query_weight_limit=limit)
