"""Key-value store factories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from luthier.core.factory import Factory
from luthier.entities import KeyValueStore, MapStore

from ._fields import get_field

if TYPE_CHECKING:
    from luthier.core.industrial_park import IndustrialPark


class MapKeyValueStoreFactory(Factory[KeyValueStore]):
    """Builds in-memory MapStore instances, optionally seeded from `initial`."""

    def build(self, name: str, config: Mapping[str, Any], park: "IndustrialPark") -> KeyValueStore:
        initial = get_field(config, "initial", {}, expected=(Mapping,), entity=name)
        return MapStore(name, initial)
