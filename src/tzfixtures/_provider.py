import logging

from ._common import InvalidZoneSourceError, ZoneNotFoundError

logger = logging.getLogger(__name__)


class ZoneProvider:
    """Serves time zones from a source, checking that it keeps its contract.

    ``source`` is any object with ``version_id``, ``get_ids()``,
    ``for_id(zone_id)`` and ``get_system_default_id()``. The version and the
    list of IDs are read once, when the provider is created; zones are
    fetched from the source on first use and kept for the life of the
    provider.
    """

    def __init__(self, source):
        version_id = source.version_id
        if version_id is None:
            raise InvalidZoneSourceError(
                "Source returned None for its version ID"
            )

        ids = source.get_ids()
        if ids is None:
            raise InvalidZoneSourceError(
                "Source returned None for its ID list"
            )

        ids = list(ids)
        if any(zone_id is None for zone_id in ids):
            raise InvalidZoneSourceError(
                f"Source {version_id} returned a None ID"
            )

        self._source = source
        self._version_id = version_id
        self._ids = tuple(sorted(set(ids)))
        self._id_set = frozenset(self._ids)
        self._cache = {}

    @property
    def version_id(self):
        return self._version_id

    @property
    def ids(self):
        """The IDs served by this provider, in ordinal order."""
        return self._ids

    def get_zone_or_none(self, zone_id):
        """Return the zone for ``zone_id``, or ``None`` if it is not served."""
        if zone_id is None:
            raise TypeError("zone_id must not be None")

        zone = self._cache.get(zone_id, None)
        if zone is None:
            if zone_id not in self._id_set:
                return None

            zone = self._cache.setdefault(zone_id, self._load_zone(zone_id))

        return zone

    def get_system_default(self):
        """Return the zone the source maps the host's local time zone to."""
        zone_id = self._source.get_system_default_id()
        if zone_id is None:
            raise ZoneNotFoundError(
                "System default time zone is unknown to source "
                + f"{self._version_id}"
            )

        return self[zone_id]

    def _load_zone(self, zone_id):
        zone = self._source.for_id(zone_id)
        if zone is None:
            raise InvalidZoneSourceError(
                f"Source {self._version_id} returned None for ID {zone_id}"
            )

        if zone.key != zone_id:
            raise InvalidZoneSourceError(
                f"Source {self._version_id} returned zone {zone.key} "
                + f"for ID {zone_id}"
            )

        logger.debug(
            "Loaded zone %r from source %r", zone_id, self._version_id
        )
        return zone

    def __getitem__(self, zone_id):
        zone = self.get_zone_or_none(zone_id)
        if zone is None:
            raise ZoneNotFoundError(f"No time zone found with key {zone_id}")

        return zone

    def __contains__(self, zone_id):
        return zone_id in self._id_set

    def __iter__(self):
        return iter(self._ids)

    def __len__(self):
        return len(self._ids)

    def __repr__(self):
        return f"{self.__class__.__name__}(version_id={self._version_id!r})"
