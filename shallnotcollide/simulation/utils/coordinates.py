# shallnotcollide/simulation/utils/coordinates.py
"""
Great-circle helpers for the simulation. These run for every aircraft and
every aircraft pair on each tick, so they do no input validation: out of
range coordinates give meaningless but finite results.
"""
import numpy as np
from typing import Tuple

from ...constants.simulation import SimConstants

LatLon = Tuple[float, float]

def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two points in kilometers."""
    d_lat = np.radians(lat2 - lat1)
    d_lon = np.radians(lon2 - lon1)
    a = np.sin(d_lat / 2)**2 + np.cos(np.radians(lat1)) * np.cos(np.radians(lat2)) * np.sin(d_lon / 2)**2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return float(SimConstants.EARTH_RADIUS_KM * c)

def bearing_deg(lat1: float, lon1: float, lat2: float, lon2: float) -> int:
    """
    Initial bearing from point 1 to point 2, whole degrees in [0, 360).
    Identical points have no defined bearing.
    """
    lat1_rad, lat2_rad = np.radians(lat1), np.radians(lat2)
    d_lon = np.radians(lon2 - lon1)
    y = np.sin(d_lon) * np.cos(lat2_rad)
    x = np.cos(lat1_rad) * np.sin(lat2_rad) - np.sin(lat1_rad) * np.cos(lat2_rad) * np.cos(d_lon)
    bearing = float(np.degrees(np.arctan2(y, x)))
    if bearing < 0:
        bearing += 360
    # Round half up; 359.5 and above wraps to 0
    return int(np.floor(bearing + 0.5)) % 360

def interpolate(lat1: float, lon1: float, lat2: float, lon2: float, ratio: float) -> LatLon:
    """Linear step in raw coordinate space, adequate for short hops."""
    return lat1 + (lat2 - lat1) * ratio, lon1 + (lon2 - lon1) * ratio

def distance(p1: LatLon, p2: LatLon) -> float:
    return distance_km(p1[0], p1[1], p2[0], p2[1])

def bearing(p1: LatLon, p2: LatLon) -> int:
    return bearing_deg(p1[0], p1[1], p2[0], p2[1])
