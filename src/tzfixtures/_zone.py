from datetime import datetime, timedelta, tzinfo

ZERO = timedelta(0)
ONE_DAY = timedelta(days=1)

# Fixtures tend to reuse the same handful of offsets (whole hours, mostly), so
# keep one timedelta per distinct number of seconds rather than building a
# new one for every zone.
_DELTA_CACHE = {}


def _load_timedelta(seconds):
    return _DELTA_CACHE.setdefault(seconds, timedelta(seconds=seconds))


class FixedZone(tzinfo):
    """A time zone with a single, constant UTC offset and no DST.

    ``offset`` may be a :class:`datetime.timedelta` or a number of seconds
    east of UTC. ``name`` is reported by :meth:`tzname`; it defaults to the
    key.
    """

    def __init__(self, key, offset=0, name=None):
        if key is None:
            raise TypeError("key must not be None")

        if not isinstance(offset, timedelta):
            offset = _load_timedelta(offset)

        if not -ONE_DAY < offset < ONE_DAY:
            raise ValueError(
                "offset must be strictly between -24h and 24h, "
                + f"got: {offset!r}"
            )

        self._key = key
        self._offset = offset
        self._name = name

    @property
    def key(self):
        return self._key

    def utcoffset(self, dt):
        return self._offset

    def dst(self, dt):
        return ZERO

    def tzname(self, dt):
        if self._name is not None:
            return self._name
        return self._key

    def fromutc(self, dt):
        """Shift a UTC datetime attached to this zone by the fixed offset"""

        if not isinstance(dt, datetime):
            raise TypeError("fromutc() requires a datetime argument")
        if dt.tzinfo is not self:
            raise ValueError("dt.tzinfo is not self")

        return dt + self._offset

    def __eq__(self, other):
        if not isinstance(other, FixedZone):
            return NotImplemented

        return (self._key, self._offset, self._name) == (
            other._key,
            other._offset,
            other._name,
        )

    def __hash__(self):
        return hash((self._key, self._offset, self._name))

    def __reduce__(self):
        return (self.__class__, (self._key, self._offset, self._name))

    def __str__(self):
        return f"{self._key}"

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(key={self._key!r}, "
            + f"offset={self._offset!r}, name={self._name!r})"
        )
