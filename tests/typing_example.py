"""Exercises the type stubs for the tzfixtures module."""
from __future__ import annotations

import typing
from datetime import datetime, timedelta, timezone
from typing import Callable, KeysView, Optional, Sequence, Tuple

import tzfixtures

REGISTERED_FUNCTIONS = []


def register(f: Callable[[], typing.Any]) -> Callable[[], typing.Any]:
    REGISTERED_FUNCTIONS.append(f)
    return f


def _host_zone() -> Optional[str]:
    return "Pacific Standard Time"


def _builder() -> tzfixtures.FakeZoneSourceBuilder:
    builder = tzfixtures.FakeZoneSourceBuilder(get_host_zone_id=_host_zone)
    builder.add(tzfixtures.FixedZone("America/Los_Angeles", -8 * 3600, "PST"))
    builder.add(tzfixtures.FixedZone("UTC"))
    host_ids = builder.host_ids_to_zone_ids
    host_ids["Pacific Standard Time"] = "America/Los_Angeles"
    return builder


@register
def test_fixed_zone() -> Sequence[
    Tuple[Optional[str], Optional[timedelta], Optional[timedelta]]
]:
    LA = tzfixtures.FixedZone("America/Los_Angeles", -8 * 3600, "PST")
    dt: datetime = datetime(2020, 1, 1, tzinfo=LA)

    offsets: typing.List[
        Tuple[Optional[str], Optional[timedelta], Optional[timedelta]]
    ] = []
    dt_offset = (dt.tzname(), dt.utcoffset(), dt.dst())
    assert dt_offset == ("PST", timedelta(hours=-8), timedelta(hours=0))
    offsets.append(dt_offset)

    dt_utc = dt.astimezone(timezone.utc)
    assert dt_utc.astimezone(LA) == dt

    return offsets


@register
def test_build() -> tzfixtures.FakeZoneSource:
    source: tzfixtures.FakeZoneSource = _builder().build()
    assert source.version_id == tzfixtures.DEFAULT_VERSION_ID

    return source


@register
def test_get_ids() -> KeysView[str]:
    ids = _builder().build().get_ids()
    assert "UTC" in ids

    return ids


@register
def test_for_id() -> typing.Any:
    source = _builder().build()
    try:
        source.for_id("Europe/Lisbon")
    except ValueError:
        pass
    else:
        assert False

    return source.for_id("UTC")


@register
def test_system_default_id() -> Optional[str]:
    zone_id = _builder().build().get_system_default_id()
    assert zone_id == "America/Los_Angeles"

    return zone_id


@register
def test_provider() -> Tuple[str, ...]:
    provider: tzfixtures.ZoneProvider = _builder().build().to_provider()
    assert provider.get_zone_or_none("Europe/Lisbon") is None
    assert str(provider.get_system_default()) == "America/Los_Angeles"

    return provider.ids


@register
def test_bad_mapping() -> None:
    builder = _builder()
    builder.host_ids_to_zone_ids["Host/X"] = "Z"
    try:
        builder.build()
    except tzfixtures.InvalidMappingError:
        pass
    else:
        assert False


def call_functions() -> None:
    for function in REGISTERED_FUNCTIONS:
        function()

    print("Success!")


if __name__ == "__main__":
    call_functions()
