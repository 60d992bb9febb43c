"""Unit tests for the identifier and clock ports."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from uuid import UUID

from signup.services._shared.ports import (
    FixedClock,
    SequentialIdProvider,
    UTCClock,
    UUID4Provider,
)
from signup.services._shared.ports.clock import isoformat_utc

UUID4_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


class TestIsoformatUtc:
    def test_aware_utc(self):
        moment = datetime(2024, 1, 1, tzinfo=timezone.utc)

        assert isoformat_utc(moment) == "2024-01-01T00:00:00.000Z"

    def test_naive_is_taken_as_utc(self):
        assert isoformat_utc(datetime(2024, 5, 6, 7, 8, 9, 10000)) == "2024-05-06T07:08:09.010Z"

    def test_offset_is_converted_to_utc(self):
        moment = datetime(2024, 1, 1, 3, 0, tzinfo=timezone(timedelta(hours=3)))

        assert isoformat_utc(moment) == "2024-01-01T00:00:00.000Z"

    def test_offset_crossing_midnight(self):
        moment = datetime(2024, 1, 1, 1, 30, tzinfo=timezone(timedelta(hours=3)))

        assert isoformat_utc(moment) == "2023-12-31T22:30:00.000Z"

    def test_milliseconds_are_truncated_not_rounded(self):
        moment = datetime(2024, 1, 1, 23, 59, 59, 999999, tzinfo=timezone.utc)

        assert isoformat_utc(moment) == "2024-01-01T23:59:59.999Z"


class TestClocks:
    def test_fixed_clock_repeats_its_instant(self):
        clock = FixedClock(datetime(2024, 1, 1, 12, 30, 45, 123456, tzinfo=timezone.utc))

        assert clock.now() == clock.now() == "2024-01-01T12:30:45.123Z"

    def test_utc_clock_reads_wall_time(self, freeze_time):
        with freeze_time("2024-02-29T10:11:12.345678+00:00"):
            assert UTCClock().now() == "2024-02-29T10:11:12.345Z"


class TestIdProviders:
    def test_uuid4_provider_shape_and_uniqueness(self):
        provider = UUID4Provider()

        ids = [provider.fresh_id() for _ in range(50)]

        assert all(UUID4_RE.match(value) for value in ids)
        assert len(set(ids)) == len(ids)

    def test_sequential_numbering_starts_at_one(self):
        provider = SequentialIdProvider()

        assert provider.fresh_id() == "00000000-0000-4000-8000-000000000001"
        assert provider.fresh_id() == "00000000-0000-4000-8000-000000000002"

    def test_sequential_honours_start(self):
        provider = SequentialIdProvider(start=255)

        assert provider.fresh_id() == "00000000-0000-4000-8000-0000000000ff"
        assert UUID(provider.fresh_id()).int & 0xFFFF == 256

    def test_sequential_ids_are_uuid4_and_distinct(self):
        provider = SequentialIdProvider(start=1)

        ids = [provider.fresh_id() for _ in range(100)]

        assert all(UUID4_RE.match(value) for value in ids)
        assert all(UUID(value).version == 4 for value in ids)
        assert len(set(ids)) == len(ids)
