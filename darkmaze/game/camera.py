from __future__ import annotations

from darkmaze import config
from darkmaze.geometry.location import FineLoc


class Camera:
    """A view center that trails behind the thing it follows.

    The camera stays put while the target moves within ``lag`` tiles of it.
    Once the target gets further away along an axis, the camera is pulled to
    ``lag`` tiles behind it on that axis and lined up with it on the other.
    """

    def __init__(self, position: FineLoc, lag: float = config.CAMERA_LAG) -> None:
        self.position = position
        self.lag = lag

    def settle(self, target: FineLoc) -> FineLoc:
        """Catch up with ``target`` if it got too far ahead. Returns the position."""
        dx, dy = target.sub(self.position).as_coords()
        if dx > self.lag:
            self.position = target.sub(FineLoc.from_coords((self.lag, 0.0)))
        elif dx < -self.lag:
            self.position = target.sub(FineLoc.from_coords((-self.lag, 0.0)))
        elif dy > self.lag:
            self.position = target.sub(FineLoc.from_coords((0.0, self.lag)))
        elif dy < -self.lag:
            self.position = target.sub(FineLoc.from_coords((0.0, -self.lag)))
        return self.position
