class UnknownZoneIdError(ValueError):
    """Raised when a source is asked for an ID it does not contain."""


class InvalidMappingError(RuntimeError):
    """Raised when a host ID maps to a zone the builder does not hold."""


class ZoneNotFoundError(KeyError):
    """Raised when a provider cannot find a time zone for a key."""


class InvalidZoneSourceError(ValueError):
    """Raised when a wrapped source breaks the source contract."""
