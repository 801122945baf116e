"""Geometry access interface and adapter registry.

The encoder never inspects a geometry directly. It asks a GeometryAccess
adapter for the geometry's kind, its coordinates (point-like geometries) or
its children (everything else). Indices are 1-based.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Optional, Type

from .errors import UnsupportedGeometryError
from .geometry import Empty, Geometry, Point
from .kinds import GEOJSON_NAMES, GeometryKind

logger = logging.getLogger(__name__)


class GeometryAccess(ABC):
    """Capability interface over a concrete geometry representation."""

    @abstractmethod
    def kind_of(self, geom: Any) -> Optional[GeometryKind]:
        """Classify a geometry, or return None if its kind is unknown."""
        pass

    @abstractmethod
    def coord_count(self, geom: Any) -> int:
        """Number of coordinate values of a point-like geometry."""
        pass

    @abstractmethod
    def coord_at(self, geom: Any, i: int) -> float:
        """The i-th coordinate value (1-based, axis order)."""
        pass

    @abstractmethod
    def child_count(self, geom: Any) -> int:
        """Number of sub-geometries of a composite geometry."""
        pass

    @abstractmethod
    def child_at(self, geom: Any, i: int) -> Any:
        """The i-th sub-geometry (1-based)."""
        pass


# Registry of access adapters by geometry type
_access_registry: Dict[type, Type[GeometryAccess]] = {}


def register_access(geom_type: type):
    """Decorator to register an access adapter for a geometry type."""
    def decorator(cls: Type[GeometryAccess]):
        _access_registry[geom_type] = cls
        logger.debug("Registered %s for %s", cls.__name__, geom_type.__name__)
        return cls
    return decorator


def get_access(geom: Any) -> GeometryAccess:
    """Get an access adapter instance for a geometry."""
    # Check for exact match, then base classes
    for klass in type(geom).__mro__:
        if klass in _access_registry:
            return _access_registry[klass]()

    # Anything speaking the geo interface (shapely, geopandas, ...)
    if hasattr(geom, '__geo_interface__') or isinstance(geom, Mapping):
        return GeoJSONAccess()

    raise UnsupportedGeometryError(
        f"No geometry access adapter for {type(geom).__name__}"
    )


@register_access(Geometry)
class NativeAccess(GeometryAccess):
    """Access adapter for geowkb.geometry values."""

    def kind_of(self, geom: Geometry) -> Optional[GeometryKind]:
        if isinstance(geom, Empty):
            return None
        if isinstance(geom, Point) and geom.is_empty:
            return None
        return geom.kind

    def coord_count(self, geom: Point) -> int:
        return int(geom.coords.size)

    def coord_at(self, geom: Point, i: int) -> float:
        return float(geom.coords[i - 1])

    def child_count(self, geom: Geometry) -> int:
        return len(geom)

    def child_at(self, geom: Geometry, i: int) -> Any:
        return geom[i - 1]


_GEOJSON_KINDS: Dict[str, GeometryKind] = {name: kind for kind, name in GEOJSON_NAMES.items()}


def _field(mapping: Mapping, key: str) -> Sequence:
    value = mapping.get(key)
    return () if value is None else value


class _Position(tuple):
    """A bare GeoJSON position inside a LineString, ring or MultiPoint."""


class _Path(tuple):
    """A bare GeoJSON position list (LineString member or polygon ring)."""


class _Rings(tuple):
    """Bare GeoJSON polygon coordinates inside a MultiPolygon."""


@register_access(_Position)
@register_access(_Path)
@register_access(_Rings)
class GeoJSONAccess(GeometryAccess):
    """
    Access adapter for GeoJSON-style mappings and __geo_interface__ objects.

    Nested coordinate arrays have no type of their own; they are wrapped
    while walking so each level classifies as the kind its parent implies:
    positions as POINT, position lists (members and rings) as LINESTRING,
    ring lists as POLYGON.
    """

    @staticmethod
    def _mapping(geom: Any) -> Mapping:
        if hasattr(geom, '__geo_interface__'):
            return geom.__geo_interface__
        return geom

    def kind_of(self, geom: Any) -> Optional[GeometryKind]:
        if isinstance(geom, _Position):
            return GeometryKind.POINT if len(geom) else None
        if isinstance(geom, _Path):
            return GeometryKind.LINESTRING
        if isinstance(geom, _Rings):
            return GeometryKind.POLYGON

        mapping = self._mapping(geom)
        type_name = mapping.get('type')
        if not isinstance(type_name, str):
            return None
        kind = _GEOJSON_KINDS.get(type_name)
        if kind is GeometryKind.POINT and not len(_field(mapping, 'coordinates')):
            return None
        return kind

    def coord_count(self, geom: Any) -> int:
        return len(self._position(geom))

    def coord_at(self, geom: Any, i: int) -> float:
        return float(self._position(geom)[i - 1])

    def child_count(self, geom: Any) -> int:
        return len(self._children(geom))

    def child_at(self, geom: Any, i: int) -> Any:
        child = self._children(geom)[i - 1]
        if isinstance(geom, (_Path, _Rings)):
            return self._wrap_member(geom, child)

        kind = self.kind_of(geom)
        if kind is GeometryKind.GEOMETRYCOLLECTION:
            return child
        if kind in (GeometryKind.LINESTRING, GeometryKind.MULTIPOINT):
            return _Position(child)
        if kind in (GeometryKind.POLYGON, GeometryKind.MULTILINESTRING):
            return _Path(child)
        return _Rings(child)

    @staticmethod
    def _wrap_member(parent: tuple, child: Any) -> Any:
        if isinstance(parent, _Path):
            return _Position(child)
        return _Path(child)

    def _position(self, geom: Any) -> Sequence:
        if isinstance(geom, _Position):
            return geom
        return _field(self._mapping(geom), 'coordinates')

    def _children(self, geom: Any) -> Sequence:
        if isinstance(geom, (_Path, _Rings)):
            return geom
        mapping = self._mapping(geom)
        if mapping.get('type') == 'GeometryCollection':
            return _field(mapping, 'geometries')
        return _field(mapping, 'coordinates')
