"""Tests for the synthetic neighborhood source."""

import random
from datetime import datetime, timezone

import pytest

from neighborfit.data.base import NeighborhoodSource
from neighborfit.data.mock_neighborhoods import (
    MockNeighborhoodSource,
    derive_lifestyle,
    education_level,
    neighborhood_id,
    parse_neighborhood_id,
)
from neighborfit.engine.validation import validate_neighborhood
from neighborfit.models.neighborhood import Amenities, Level, Location

FIXED_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)
CENTER = Location(latitude=40.7128, longitude=-74.0060, city="New York", state="NY")


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _source(seed: int = 42, **kwargs) -> MockNeighborhoodSource:
    return MockNeighborhoodSource(random.Random(seed), now=lambda: FIXED_NOW, **kwargs)


class TestNeighborhoodIds:
    def test_round_trip(self):
        loc = Location(latitude=40.7128, longitude=-74.006)
        nid = neighborhood_id(loc)
        assert nid == "neighborhood_40.7128_-74.0060"
        parsed = parse_neighborhood_id(nid)
        assert parsed.latitude == pytest.approx(40.7128)
        assert parsed.longitude == pytest.approx(-74.006)

    @pytest.mark.parametrize(
        "value",
        ["40.7128_-74.0060", "neighborhood_abc_1", "neighborhood_95.0_10.0", "neighborhood_1.0"],
    )
    def test_invalid_ids(self, value):
        with pytest.raises(ValueError):
            parse_neighborhood_id(value)


class TestEducationLevel:
    @pytest.mark.parametrize(
        "income, expected",
        [(120_000, Level.HIGH), (80_000, Level.MEDIUM), (60_000, Level.MEDIUM), (50_000, Level.LOW)],
    )
    def test_income_bands(self, income, expected):
        assert education_level(income) == expected


class TestDeriveLifestyle:
    def test_dense_area_exceeds_100(self):
        lifestyle = derive_lifestyle(Amenities(restaurants=24, bars=8, parks=9), random.Random(1))
        assert lifestyle.nightlife == 96
        assert lifestyle.outdoor_activities == 72
        assert derive_lifestyle(Amenities(restaurants=30, bars=8), random.Random(1)).nightlife == 114


class TestMockNeighborhoodSource:
    def test_satisfies_protocol(self):
        assert isinstance(_source(), NeighborhoodSource)

    def test_same_seed_same_records(self):
        loc = Location(latitude=34.05, longitude=-118.24)
        assert _source(7).generate(loc) == _source(7).generate(loc)

    def test_generated_records_are_scoreable(self):
        for n in _source().find_neighborhoods(CENTER, 5):
            validate_neighborhood(n)
            assert n.last_updated == FIXED_NOW.isoformat()

    def test_find_count_in_bounds(self):
        source = _source()
        for _ in range(20):
            found = source.find_neighborhoods(CENTER, 5)
            assert 3 <= len(found) <= 10

    def test_find_stays_near_center(self):
        for n in _source().find_neighborhoods(CENTER, 10):
            assert abs(n.location.latitude - CENTER.latitude) <= 0.05
            assert abs(n.location.longitude - CENTER.longitude) <= 0.05
            assert n.location.city == "New York"

    def test_generated_ranges(self):
        for n in _source(3).find_neighborhoods(CENTER, 5, min_count=10, max_count=10):
            assert 5 <= n.safety.crime_rate <= 34
            assert 70 <= n.safety.safety_score <= 100
            assert 50 <= n.transportation.walkability_score <= 100
            assert 2_000 <= n.demographics.total_population <= 16_999
            assert n.id == neighborhood_id(n.location)

    def test_lookup_is_cached(self):
        source = _source()
        loc = Location(latitude=41.0, longitude=-73.0)
        assert source.get_neighborhood(loc) is source.get_neighborhood(loc)

    def test_cache_expires(self):
        clock = FakeClock()
        source = _source(clock=clock, cache_ttl_seconds=60)
        loc = Location(latitude=41.0, longitude=-73.0)
        first = source.get_neighborhood(loc)
        clock.now = 59
        assert source.get_neighborhood(loc) is first
        clock.now = 61
        assert source.get_neighborhood(loc) is not first

    def test_expired_entries_are_evicted(self):
        clock = FakeClock()
        source = _source(clock=clock, cache_ttl_seconds=60)
        for _ in range(200):
            source.find_neighborhoods(CENTER, 50)
            clock.now += 61
        # Only the last batch can still be live
        assert source.cache_size <= 10
        clock.now += 61
        assert source.cache_size == 0

    def test_cache_size_capped(self):
        source = _source(cache_max_entries=25)
        for _ in range(50):
            source.find_neighborhoods(CENTER, 50)
        assert source.cache_size <= 25
