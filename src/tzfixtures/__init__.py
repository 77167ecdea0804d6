__all__ = [
    "DEFAULT_VERSION_ID",
    "FakeZoneSource",
    "FakeZoneSourceBuilder",
    "FixedZone",
    "ZoneProvider",
    "get_host_zone_id",
    "InvalidMappingError",
    "InvalidZoneSourceError",
    "UnknownZoneIdError",
    "ZoneNotFoundError",
]

from . import _hostzone
from ._common import (
    InvalidMappingError,
    InvalidZoneSourceError,
    UnknownZoneIdError,
    ZoneNotFoundError,
)
from ._provider import ZoneProvider
from ._source import DEFAULT_VERSION_ID, FakeZoneSource, FakeZoneSourceBuilder
from ._version import __version__
from ._zone import FixedZone

get_host_zone_id = _hostzone.get_host_zone_id


def __dir__():
    return sorted(__all__ + ["__version__"])
