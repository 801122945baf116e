"""Exceptions raised by geowkb."""


class GeoWkbError(Exception):
    """Base class for geowkb errors."""


class UnsupportedGeometryError(GeoWkbError, TypeError):
    """No access adapter understands the geometry representation."""


class UnknownGeometryKindError(GeoWkbError, ValueError):
    """A geometry has no determinable kind and the encoder is strict."""
