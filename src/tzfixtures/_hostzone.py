import os

import tzlocal

TZPATH = (
    "/usr/share/zoneinfo",
    "/usr/lib/zoneinfo",
    "/usr/share/lib/zoneinfo",
    "/etc/zoneinfo",
)


def get_host_zone_id():
    """Retrieve the ID of the host's configured local time zone.

    The ``TZ`` environment variable takes precedence; otherwise the platform
    configuration is consulted through ``tzlocal``. Returns ``None`` if the
    host does not report a zone ID.
    """
    # tzlocal caches its first answer for the life of the process, so TZ is
    # read here on every call; fixtures switch it between arbitrary host IDs
    # such as "GMT Standard Time" which need not exist in any tz database.
    if "TZ" in os.environ:
        zone_id = _zone_id_from_env(os.environ["TZ"])
        if zone_id:
            return zone_id

    return tzlocal.get_localzone_name() or None


def _zone_id_from_env(value):
    # POSIX allows TZ=:Area/City to mean "load Area/City from the database"
    if value.startswith(":"):
        value = value[1:]

    if not os.path.isabs(value):
        return value

    # TZ=/usr/share/zoneinfo/Area/City names a file; recover the key from it
    path = os.path.normpath(value)
    for search_path in TZPATH:
        if not path.startswith(search_path + os.sep):
            continue

        key = os.path.relpath(path, search_path)
        if key == os.curdir or key.split(os.sep)[0] == os.pardir:
            return None

        if os.sep != "/":  # pragma: nocover
            key = key.replace(os.sep, "/")
        return key

    return None
