"""Exceptions raised by polysweep geometry."""


class GeometryError(ValueError):
    """Base class for geometry input errors."""


class InvalidCoordinate(GeometryError):
    """A coordinate is NaN or infinite."""


class EmptyPolygon(GeometryError):
    """An operation needs at least one vertex."""
