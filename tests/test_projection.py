import math

import numpy as np
import pytest

from planisphere.coordinates import (
    CartesianCoordinates,
    HorizontalCoordinates,
    StereographicProjection,
)


@pytest.fixture
def projection():
    return StereographicProjection(HorizontalCoordinates.of_deg(30, 20))


def _distance(a: CartesianCoordinates, b: CartesianCoordinates) -> float:
    return math.sqrt(a.distance_squared(b))


class TestStereographicProjection:
    def test_center_maps_to_origin(self, projection):
        xy = projection.apply(projection.center)
        assert xy.x == pytest.approx(0.0, abs=1e-12)
        assert xy.y == pytest.approx(0.0, abs=1e-12)

    def test_origin_maps_to_center(self, projection):
        azalt = projection.inverse_apply(CartesianCoordinates(0.0, 0.0))
        assert azalt.az_deg == pytest.approx(30.0)
        assert azalt.alt_deg == pytest.approx(20.0)

    def test_known_point(self):
        projection = StereographicProjection(HorizontalCoordinates(0.0, 0.0))
        xy = projection.apply(HorizontalCoordinates.of_deg(90, 0))
        assert xy.x == pytest.approx(1.0)
        assert xy.y == pytest.approx(0.0, abs=1e-12)

        zenith = projection.apply(HorizontalCoordinates.of_deg(0, 90))
        assert zenith.x == pytest.approx(0.0, abs=1e-12)
        assert zenith.y == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "az_deg, alt_deg",
        [(0, 0), (45, 10), (120, -30), (200, 60), (300, 89), (359, -80), (30, 20)],
    )
    def test_round_trip(self, projection, az_deg, alt_deg):
        azalt = HorizontalCoordinates.of_deg(az_deg, alt_deg)
        back = projection.inverse_apply(projection.apply(azalt))
        assert back.alt == pytest.approx(azalt.alt, abs=1e-9)
        assert math.cos(back.az - azalt.az) == pytest.approx(1.0, abs=1e-9)

    def test_apply_arrays_matches_apply(self, projection):
        az = np.radians([0.0, 45.0, 200.0, 310.0])
        alt = np.radians([0.0, 10.0, 60.0, -25.0])
        x, y = projection.apply_arrays(az, alt)
        for i in range(len(az)):
            xy = projection.apply(HorizontalCoordinates(az[i], alt[i]))
            assert x[i] == pytest.approx(xy.x)
            assert y[i] == pytest.approx(xy.y)

    def test_apply_to_angle(self, projection):
        assert projection.apply_to_angle(math.pi) == pytest.approx(2.0)
        assert projection.apply_to_angle(0.0) == 0.0

    @pytest.mark.parametrize("parallel_alt_deg", [-40, 0, 10, 45, 80])
    def test_parallel_circle_contains_projected_points(self, projection, parallel_alt_deg):
        parallel = HorizontalCoordinates.of_deg(0, parallel_alt_deg)
        center = projection.circle_center_for_parallel(parallel)
        radius = projection.circle_radius_for_parallel(parallel)
        assert center.x == 0.0
        for az_deg in (0, 75, 160, 250, 340):
            xy = projection.apply(HorizontalCoordinates.of_deg(az_deg, parallel_alt_deg))
            assert _distance(center, xy) == pytest.approx(radius)

    @pytest.mark.parametrize("meridian_az_deg", [60, 100, 170, 250, 350])
    def test_meridian_circle_contains_projected_points(self, projection, meridian_az_deg):
        meridian = HorizontalCoordinates.of_deg(meridian_az_deg, 0)
        center = projection.circle_center_for_meridian(meridian)
        radius = projection.circle_radius_for_meridian(meridian)
        for alt_deg in (-60, -10, 0, 35, 80):
            xy = projection.apply(HorizontalCoordinates.of_deg(meridian_az_deg, alt_deg))
            assert _distance(center, xy) == pytest.approx(radius)

    def test_parallel_through_antipode_is_a_line(self):
        projection = StereographicProjection(HorizontalCoordinates(0.0, 0.0))
        horizon = HorizontalCoordinates(0.0, 0.0)
        assert math.isinf(projection.circle_radius_for_parallel(horizon))
        assert math.isinf(projection.circle_center_for_parallel(horizon).y)

    def test_meridian_through_center_is_a_line(self, projection):
        meridian = HorizontalCoordinates.of_deg(30, 0)
        assert math.isinf(projection.circle_radius_for_meridian(meridian))
        assert math.isinf(projection.circle_center_for_meridian(meridian).x)

    def test_no_value_equality(self, projection):
        with pytest.raises(TypeError):
            projection == StereographicProjection(HorizontalCoordinates.of_deg(30, 20))
