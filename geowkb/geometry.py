"""
Native Geometry Values
======================

Immutable geometry values that the encoder understands out of the box.

Design:
- Frozen dataclasses, coordinates held as read-only float64 arrays
- Fail-fast validation in __post_init__
- Composites are sequences of their children (0-indexed, len())
"""

import numpy as np
from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Optional, Tuple

from .kinds import GeometryKind

MIN_DIMENSIONS = 2
MAX_DIMENSIONS = 4


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def _point_coords(values: Any) -> np.ndarray:
    """Validate a single position."""
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Point coordinates must be 1-D, got shape {arr.shape}")
    if arr.size and not MIN_DIMENSIONS <= arr.size <= MAX_DIMENSIONS:
        raise ValueError(
            f"Point must have {MIN_DIMENSIONS}-{MAX_DIMENSIONS} coordinates, got {arr.size}"
        )
    return _readonly(arr)


def _path_coords(values: Any) -> np.ndarray:
    """Validate a sequence of positions as an Nxd array."""
    if isinstance(values, np.ndarray):
        arr = values.astype(np.float64, copy=True)
    else:
        rows = [p.coords if isinstance(p, Point) else p for p in values]
        if not rows:
            return _readonly(np.empty((0, MIN_DIMENSIONS), dtype=np.float64))
        arr = np.array(rows, dtype=np.float64)

    if arr.shape[:1] == (0,):
        return _readonly(np.empty((0, MIN_DIMENSIONS), dtype=np.float64))
    if arr.ndim != 2:
        raise ValueError(f"Positions must form an Nxd array, got shape {arr.shape}")
    if not MIN_DIMENSIONS <= arr.shape[1] <= MAX_DIMENSIONS:
        raise ValueError(
            f"Positions must have {MIN_DIMENSIONS}-{MAX_DIMENSIONS} coordinates, got {arr.shape[1]}"
        )
    return _readonly(arr)


def _same_bits(a: np.ndarray, b: np.ndarray) -> bool:
    """Bit-exact comparison, consistent with hashing tobytes()."""
    return a.shape == b.shape and a.tobytes() == b.tobytes()


def _coerce(values: Any, cls: type, name: str) -> tuple:
    """Build a tuple of `cls` children, converting raw coordinates."""
    parts = []
    for value in values:
        if isinstance(value, cls):
            parts.append(value)
        elif isinstance(value, Geometry):
            raise TypeError(
                f"{name} members must be {cls.__name__}, got {type(value).__name__}"
            )
        else:
            parts.append(cls(value))
    return tuple(parts)


class Geometry:
    """Base class of the native geometry values."""

    kind: ClassVar[Optional[GeometryKind]] = None


@dataclass(frozen=True)
class Empty(Geometry):
    """A geometry without a determinable kind."""

    def __len__(self) -> int:
        return 0


EMPTY = Empty()


@dataclass(frozen=True, eq=False)
class Point(Geometry):
    """
    A single position.

    Attributes:
        coords: 2-4 coordinate values in axis order (x, y[, z[, m]]).
            An empty Point has no kind.
    """

    kind: ClassVar[GeometryKind] = GeometryKind.POINT

    coords: Any = ()

    def __post_init__(self):
        object.__setattr__(self, 'coords', _point_coords(self.coords))

    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    @property
    def x(self) -> float:
        return float(self.coords[0])

    @property
    def y(self) -> float:
        return float(self.coords[1])

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return _same_bits(self.coords, other.coords)

    def __hash__(self):
        return hash(self.coords.tobytes())


@dataclass(frozen=True, eq=False)
class LineString(Geometry):
    """
    A path of positions.

    Attributes:
        coords: Nxd array of positions (Points or coordinate sequences accepted)
    """

    kind: ClassVar[GeometryKind] = GeometryKind.LINESTRING

    coords: Any = ()

    def __post_init__(self):
        object.__setattr__(self, 'coords', _path_coords(self.coords))

    def __len__(self) -> int:
        return len(self.coords)

    def __getitem__(self, index: int) -> Point:
        return Point(self.coords[index])

    def __iter__(self) -> Iterator[Point]:
        for row in self.coords:
            yield Point(row)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return _same_bits(self.coords, other.coords)

    def __hash__(self):
        return hash((type(self).__name__, self.coords.tobytes()))


@dataclass(frozen=True, eq=False)
class LinearRing(LineString):
    """Polygon boundary. Its kind is implied by the enclosing polygon."""


@dataclass(frozen=True)
class _Composite(Geometry):
    """Shared sequence behaviour of geometries made of parts."""

    def _parts(self) -> tuple:
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self._parts())

    def __getitem__(self, index: int):
        return self._parts()[index]

    def __iter__(self):
        return iter(self._parts())


@dataclass(frozen=True)
class Polygon(_Composite):
    """
    Exterior ring followed by zero or more interior rings.

    Attributes:
        rings: LinearRings (or position sequences)
    """

    kind: ClassVar[GeometryKind] = GeometryKind.POLYGON

    rings: Tuple[LinearRing, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'rings', _coerce(self.rings, LinearRing, 'Polygon'))

    def _parts(self) -> tuple:
        return self.rings

    @property
    def exterior(self) -> Optional[LinearRing]:
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> Tuple[LinearRing, ...]:
        return self.rings[1:]


@dataclass(frozen=True)
class MultiPoint(_Composite):
    kind: ClassVar[GeometryKind] = GeometryKind.MULTIPOINT

    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'points', _coerce(self.points, Point, 'MultiPoint'))

    def _parts(self) -> tuple:
        return self.points


@dataclass(frozen=True)
class MultiLineString(_Composite):
    kind: ClassVar[GeometryKind] = GeometryKind.MULTILINESTRING

    lines: Tuple[LineString, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'lines', _coerce(self.lines, LineString, 'MultiLineString'))

    def _parts(self) -> tuple:
        return self.lines


@dataclass(frozen=True)
class MultiPolygon(_Composite):
    kind: ClassVar[GeometryKind] = GeometryKind.MULTIPOLYGON

    polygons: Tuple[Polygon, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'polygons', _coerce(self.polygons, Polygon, 'MultiPolygon'))

    def _parts(self) -> tuple:
        return self.polygons


@dataclass(frozen=True)
class GeometryCollection(_Composite):
    """
    Heterogeneous collection. Members must already be geometry values
    (native or any representation an access adapter understands).
    """

    kind: ClassVar[GeometryKind] = GeometryKind.GEOMETRYCOLLECTION

    geometries: Tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'geometries', tuple(self.geometries))

    def _parts(self) -> tuple:
        return self.geometries
