from wherewhen.shared.utils.datetime import ensure_utc, utc_now
from wherewhen.shared.utils.generators import generate_cuid
from wherewhen.shared.utils.geo import EARTH_RADIUS_KM, distance_km

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "distance_km",
    "EARTH_RADIUS_KM",
]
