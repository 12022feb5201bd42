"""Coordinate helpers used for framing the map.

Centres here are plain arithmetic means of boundary coordinates, not
area-weighted centroids. That is all the map needs to pick a starting view.
"""
import numpy as np

from ecomap.config import DEFAULT_CENTER


def _first_ring(geom):
    if geom.geom_type == "Polygon":
        return geom.exterior.coords
    if geom.geom_type == "MultiPolygon":
        return geom.geoms[0].exterior.coords
    if geom.geom_type in ("MultiLineString", "MultiPoint", "GeometryCollection"):
        return _first_ring(geom.geoms[0])
    return geom.coords


def ring_centroid(geom):
    """Mean (lat, lon) of a geometry's first ring, or None when empty.

    For a MultiPolygon only the exterior of the first part counts, which
    keeps hover anchors on the main shape of multi-part features.
    """
    if geom is None or geom.is_empty:
        return None
    coords = np.asarray(_first_ring(geom))[:, :2]
    lon, lat = coords.mean(axis=0)
    return float(lat), float(lon)


def collect_coordinates(frames):
    parts = []
    for frame in frames:
        if frame is None or frame.empty:
            continue
        coords = frame.geometry.get_coordinates(ignore_index=True)
        if not coords.empty:
            parts.append(coords[["x", "y"]].to_numpy())
    if not parts:
        return np.empty((0, 2))
    return np.vstack(parts)


def map_center(frames, default=DEFAULT_CENTER):
    """Mean (lat, lon) over all coordinates of all frames; `default` when there are none."""
    coords = collect_coordinates(frames)
    if len(coords) == 0:
        return default
    lon, lat = coords.mean(axis=0)
    return float(lat), float(lon)
