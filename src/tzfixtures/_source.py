import logging
import types

from . import _hostzone
from ._common import InvalidMappingError, UnknownZoneIdError
from ._provider import ZoneProvider

logger = logging.getLogger(__name__)

DEFAULT_VERSION_ID = "TestZones"


class FakeZoneSource:
    """A time zone source for test purposes.

    Instances are normally created with :class:`FakeZoneSourceBuilder`. The
    constructor takes private copies of ``zones`` (a mapping of key to zone)
    and ``host_ids_to_zone_ids``, and raises :class:`InvalidMappingError` if
    a host ID maps to a zone which is not present. Zones are any objects with
    a ``key`` attribute, e.g. :class:`FixedZone` or :class:`zoneinfo.ZoneInfo`.
    """

    def __init__(
        self, version_id, zones, host_ids_to_zone_ids, get_host_zone_id=None
    ):
        if version_id is None:
            raise TypeError("version_id must not be None")

        zones = dict(zones)
        host_ids_to_zone_ids = dict(host_ids_to_zone_ids)

        for host_id, zone_id in host_ids_to_zone_ids.items():
            if zone_id is None or zone_id not in zones:
                raise InvalidMappingError(
                    f"Mapping for host ID {host_id}/{zone_id} "
                    + "has no corresponding zone."
                )

        self._version_id = version_id
        self._zones = types.MappingProxyType(zones)
        self._host_ids_to_zone_ids = types.MappingProxyType(
            host_ids_to_zone_ids
        )
        self._get_host_zone_id = get_host_zone_id

    @property
    def version_id(self):
        """The version ID to report for diagnostic purposes."""
        return self._version_id

    def get_ids(self):
        """Return an unordered, set-like view of the IDs in this source.

        Every ID in the view is accepted by :meth:`for_id` for the life of
        the source.
        """
        return self._zones.keys()

    def for_id(self, zone_id):
        """Return the zone registered under ``zone_id``.

        Raises :class:`UnknownZoneIdError` (a :class:`ValueError`) if the
        source has no such zone.
        """
        if zone_id is None:
            raise TypeError("zone_id must not be None")

        try:
            return self._zones[zone_id]
        except KeyError:
            raise UnknownZoneIdError(f"Unknown ID: {zone_id}") from None

    def get_system_default_id(self):
        """Return this source's ID for the host's local time zone.

        Returns ``None`` if the host zone has no mapping in this source.
        """
        if self._get_host_zone_id is not None:
            host_id = self._get_host_zone_id()
        else:
            host_id = _hostzone.get_host_zone_id()

        if host_id is None:
            logger.debug("Host did not report a local time zone ID")
            return None

        zone_id = self._host_ids_to_zone_ids.get(host_id)
        logger.debug("Host zone ID %r maps to %r", host_id, zone_id)
        return zone_id

    def to_provider(self):
        """Create a :class:`ZoneProvider` backed by this source."""
        return ZoneProvider(self)

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(version_id={self._version_id!r}, "
            + f"zones={len(self._zones)})"
        )


class FakeZoneSourceBuilder:
    """Builder for :class:`FakeZoneSource`.

    The builder is mutable and may be built any number of times; each
    :meth:`build` produces a source which is independent of later changes
    to the builder.

    ``zones`` is exposed as a plain list for tests which need to set other
    attributes as well as adding zones, and ``host_ids_to_zone_ids`` maps
    host time zone IDs (as reported by the OS) to the IDs served by the
    source.
    """

    def __init__(
        self,
        zones=(),
        host_ids_to_zone_ids=None,
        version_id=DEFAULT_VERSION_ID,
        get_host_zone_id=None,
    ):
        self.zones = []
        self.host_ids_to_zone_ids = {}
        self.version_id = version_id
        self.get_host_zone_id = get_host_zone_id

        if host_ids_to_zone_ids is not None:
            self.host_ids_to_zone_ids.update(host_ids_to_zone_ids)

        for zone in zones:
            self.add(zone)

    def add(self, zone):
        """Add a time zone to the builder."""
        if zone is None:
            raise TypeError("zone must not be None")

        self.zones.append(zone)

    def __iter__(self):
        return iter(self.zones)

    def __len__(self):
        return len(self.zones)

    def build(self):
        """Build a time zone source from the current state of this builder.

        Zones added under the same key replace one another; the last one
        wins. Every value in ``host_ids_to_zone_ids`` must be the key of an
        added zone, otherwise :class:`InvalidMappingError` is raised.
        """
        zone_map = {zone.key: zone for zone in self.zones}

        logger.debug(
            "Building source %r with %d zones and %d host mappings",
            self.version_id,
            len(zone_map),
            len(self.host_ids_to_zone_ids),
        )

        return FakeZoneSource(
            self.version_id,
            zone_map,
            self.host_ids_to_zone_ids,
            self.get_host_zone_id,
        )
