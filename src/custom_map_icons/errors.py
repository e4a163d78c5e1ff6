"""
Exception types for custom map icons.
"""


class MapIconError(Exception):
    """Base class for all custom map icon errors."""
    pass


class IconLoadError(MapIconError):
    """Raised when an icon definition file cannot be read or parsed.

    Recoverable: the catalog logs it and skips the offending source.
    """

    def __init__(self, path: object, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class SpriteLoadError(MapIconError):
    """Raised when a sprite image cannot be resolved or decoded."""
    pass


class RegistrationError(MapIconError):
    """Raised when custom icons cannot be wired into the host minimap.

    Fatal to initialization.
    """
    pass


class HostUnavailableError(RegistrationError):
    """Raised when the host minimap or one of its fields is missing."""
    pass
