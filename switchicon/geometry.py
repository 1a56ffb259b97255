from __future__ import annotations
import math
from typing import List, NamedTuple, Tuple

SIN_45 = math.sin(math.radians(45))
DASH_THICKNESS_PART = 1.0 / 12.0

Point = Tuple[float, float]


class DashGeometry(NamedTuple):
    """Size-dependent part of the dash/clip geometry.

    Recomputed only when the widget size or padding changes; everything that
    depends on the fraction is derived from it on demand.
    """
    x0: float
    y0: float
    width: float
    height: float
    thickness: float
    dash_start: Point
    dash_end: Point

    @property
    def clip_delta(self) -> float:
        return self.thickness / SIN_45

    def dash_tip(self, fraction: float) -> Point:
        sx, sy = self.dash_start
        ex, ey = self.dash_end
        return (sx + fraction * (ex - sx), sy + fraction * (ey - sy))

    def clip_polygon(self, fraction: float) -> List[Point]:
        d = self.clip_delta
        fx = self.x0 + self.width * fraction
        fy = self.y0 + self.height * fraction
        return [
            (self.x0, self.y0 + d),
            (self.x0 + d, self.y0),
            (fx, fy - d),
            (fx - d, fy),
        ]


def compute_geometry(width: float, height: float,
                     left: float = 0, top: float = 0,
                     right: float = 0, bottom: float = 0) -> DashGeometry:
    usable_w = max(0.0, float(width - left - right))
    usable_h = max(0.0, float(height - top - bottom))
    thickness = DASH_THICKNESS_PART * (usable_w + usable_h) / 2.0

    # Dash runs parallel to the diagonal, shifted towards the bottom-left
    # by half its thickness so that it borders the clip polygon.
    delta1 = 1.5 * SIN_45 * thickness
    delta2 = 0.5 * SIN_45 * thickness
    start = (left + delta2, top + delta1)
    end = (left + usable_w - delta1, top + usable_h - delta2)
    return DashGeometry(float(left), float(top), usable_w, usable_h, thickness, start, end)


def alpha_for_fraction(fraction: float, disabled_alpha: float) -> int:
    """Opacity in 0..255: opaque at fraction 0, ``disabled_alpha`` at 1."""
    return int((disabled_alpha + (1.0 - fraction) * (1.0 - disabled_alpha)) * 255)
