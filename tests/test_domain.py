"""Tests for domain definition and sub-domain interpolation."""

import math

import pytest

from domainmesh import Domain, DomainError, Ranges, interpolate_domain

SAMPLES = [(0.0, 0.0), (0.3, -0.7), (1.5, 2.25), (-2.0, 0.1)]


@pytest.fixture
def curved():
    return Domain(
        x=(lambda: -1.0, lambda: 3.0),
        z=(lambda x: x * x, lambda x: 2.0 + math.sin(x)),
        y=(lambda x, z: x - z, lambda x, z: 4.0 + x * z),
    )


class TestDomain:

    def test_box_boundaries(self):
        domain = Domain.box(x=(1, 2), z=(3, 5), y=(-1, 0))
        assert domain.footprint_extent() == (1.0, 2.0)
        assert domain.z[0](1.5) == 3.0
        assert domain.z[1](1.5) == 5.0
        assert domain.y[0](1.5, 4.0) == -1.0
        assert domain.y[1](1.5, 4.0) == 0.0

    def test_pair_must_have_two_functions(self):
        with pytest.raises(DomainError):
            Domain(
                x=(lambda: 0.0,),
                z=(lambda x: 0.0, lambda x: 1.0),
                y=(lambda x, z: 0.0, lambda x, z: 1.0),
            )

    def test_pair_entries_must_be_callable(self):
        with pytest.raises(DomainError):
            Domain(
                x=(0.0, 1.0),
                z=(lambda x: 0.0, lambda x: 1.0),
                y=(lambda x, z: 0.0, lambda x, z: 1.0),
            )


class TestRanges:

    def test_defaults_are_identity(self):
        ranges = Ranges()
        assert ranges.x == (0.0, 1.0)
        assert ranges.y == (0.0, 1.0)
        assert ranges.z == (0.0, 1.0)

    def test_from_mapping_fills_missing_axes(self):
        ranges = Ranges.from_mapping({"x": [1, 0]})
        assert ranges.x == (1.0, 0.0)
        assert ranges.z == (0.0, 1.0)

    def test_unknown_axis(self):
        with pytest.raises(ValueError):
            Ranges.from_mapping({"w": [0, 1]})

    def test_non_finite_values(self):
        with pytest.raises(ValueError):
            Ranges(x=(0.0, float("nan")))

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            Ranges(y=(0.0, 0.5, 1.0))


class TestInterpolateDomain:

    def test_identity_reproduces_domain(self, curved):
        sub = interpolate_domain(curved, {"x": [0, 1], "y": [0, 1], "z": [0, 1]})

        for j in range(2):
            assert sub.x[j]() == pytest.approx(curved.x[j]())
            for x, z in SAMPLES:
                assert sub.z[j](x) == pytest.approx(curved.z[j](x))
                assert sub.y[j](x, z) == pytest.approx(curved.y[j](x, z))

    def test_reversed_range_swaps_boundaries(self, curved):
        sub = interpolate_domain(curved, {"x": [1, 0], "z": [1, 0], "y": [1, 0]})

        assert sub.x[0]() == pytest.approx(curved.x[1]())
        assert sub.x[1]() == pytest.approx(curved.x[0]())
        for x, z in SAMPLES:
            assert sub.z[0](x) == pytest.approx(curved.z[1](x))
            assert sub.z[1](x) == pytest.approx(curved.z[0](x))
            assert sub.y[0](x, z) == pytest.approx(curved.y[1](x, z))
            assert sub.y[1](x, z) == pytest.approx(curved.y[0](x, z))

    def test_partial_range_blends_linearly(self, curved):
        sub = curved.interpolate(Ranges(y=(0.25, 0.75)))

        for x, z in SAMPLES:
            low, high = curved.y[0](x, z), curved.y[1](x, z)
            assert sub.y[0](x, z) == pytest.approx(0.75 * low + 0.25 * high)
            assert sub.y[1](x, z) == pytest.approx(0.25 * low + 0.75 * high)

    def test_each_axis_keeps_its_own_range(self):
        domain = Domain.box(x=(0, 10), z=(0, 10), y=(0, 10))
        sub = interpolate_domain(domain, Ranges(x=(0.1, 0.2), z=(0.3, 0.4), y=(0.5, 0.6)))

        assert (sub.x[0](), sub.x[1]()) == pytest.approx((1.0, 2.0))
        assert (sub.z[0](0.0), sub.z[1](0.0)) == pytest.approx((3.0, 4.0))
        assert (sub.y[0](0.0, 0.0), sub.y[1](0.0, 0.0)) == pytest.approx((5.0, 6.0))

    def test_source_domain_untouched(self, curved):
        before = curved.x[1]()
        interpolate_domain(curved, {"x": [0.5, 0.5]})
        assert curved.x[1]() == before
