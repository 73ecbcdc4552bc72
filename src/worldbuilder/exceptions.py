"""Custom exceptions for map generation."""


class WorldBuilderError(Exception):
    """Base exception for map generation errors."""

    pass


class TileOutOfRangeError(WorldBuilderError, IndexError):
    """Raised when a tile coordinate lies outside the grid."""

    pass


class UnknownLocationError(WorldBuilderError, ValueError):
    """Raised when a location is not one of the nine known cells."""

    pass


class InvalidGeometryError(WorldBuilderError, ValueError):
    """Raised when tile size, grid size or subdivision counts are not positive."""

    pass


class DeclarationError(WorldBuilderError, ValueError):
    """Raised when a map declaration file cannot be parsed."""

    pass
