import pytest

from darkmaze.game import Camera
from darkmaze.geometry import FineLoc, Loc


def test_camera_holds_while_target_is_close() -> None:
    camera = Camera(FineLoc.from_loc(Loc(5, 5)))
    target = FineLoc.from_coords((5.75, 4.5))
    assert camera.settle(target) == FineLoc.from_loc(Loc(5, 5))


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ((7.5, 5.0), (6.5, 5.0)),
        ((2.5, 5.0), (3.5, 5.0)),
        ((5.0, 7.25), (5.0, 6.25)),
        ((5.0, 3.0), (5.0, 4.0)),
    ],
)
def test_camera_trails_by_lag(
    target: tuple[float, float], expected: tuple[float, float]
) -> None:
    camera = Camera(FineLoc.from_loc(Loc(5, 5)), lag=1.0)
    position = camera.settle(FineLoc.from_coords(target))
    assert position.as_coords() == pytest.approx(expected)
    assert camera.position == position


def test_horizontal_catch_up_lines_up_vertically() -> None:
    camera = Camera(FineLoc.from_loc(Loc(0, 0)), lag=1.0)
    camera.settle(FineLoc.from_coords((3.0, 0.5)))
    assert camera.position.as_coords() == pytest.approx((2.0, 0.5))
