"""Assembly of the selected dataset layers into a folium map."""
import logging

import folium
import geopandas as gpd
import pandas as pd

from ecomap.config import (
    DATASETS,
    DEFAULT_ZOOM,
    HOTEL_MARKER,
    OUTLINE_STYLE,
    ROAD_STYLE,
    TILES,
)
from ecomap.geometry import map_center, ring_centroid
from ecomap.legend import MapLegend, legend_html
from ecomap.styling import FILL_COLUMN, HOVER_COLUMN

logger = logging.getLogger(__name__)


def selected_keys(*groups):
    """Merge checkbox selections into catalogue (draw) order, dropping unknown keys."""
    chosen = set()
    for values in groups:
        chosen.update(values or [])
    return [key for key in DATASETS if key in chosen]


def _display_columns(frame):
    # Only ship what the browser needs; raw attributes may not be JSON-safe.
    columns = [c for c in (FILL_COLUMN, HOVER_COLUMN) if c in frame.columns]
    return frame[columns + [frame.geometry.name]]


def _fill_style(opacity):
    def style_function(feature):
        return {
            "fillColor": feature["properties"].get(FILL_COLUMN) or "#cccccc",
            "color": "transparent",
            "weight": 0,
            "fillOpacity": opacity,
        }
    return style_function


def _add_fills(m, key, frame):
    cfg = DATASETS[key]
    folium.GeoJson(
        _display_columns(frame),
        name=cfg["label"],
        style_function=_fill_style(cfg["opacity"]),
        tooltip=folium.GeoJsonTooltip(fields=[HOVER_COLUMN], labels=False, sticky=True),
    ).add_to(m)


def _add_lines(m, key, frame):
    folium.GeoJson(
        frame[[frame.geometry.name]],
        name=DATASETS[key]["label"],
        style_function=lambda _: dict(ROAD_STYLE),
    ).add_to(m)


def _add_points(m, key, frame):
    group = folium.FeatureGroup(name=DATASETS[key]["label"])
    hovers = frame[HOVER_COLUMN] if HOVER_COLUMN in frame.columns else [None] * len(frame)
    for geom, hover in zip(frame.geometry, hovers):
        position = ring_centroid(geom)
        if position is None:
            continue
        folium.CircleMarker(
            location=list(position),
            radius=HOTEL_MARKER["radius"],
            color=HOTEL_MARKER["color"],
            fill=True,
            fill_color=HOTEL_MARKER["fill_color"],
            fill_opacity=1,
            tooltip=hover,
        ).add_to(group)
    group.add_to(m)


def _add_outlines(m, frames):
    outlines = gpd.GeoDataFrame(
        geometry=pd.concat([frame.geometry for frame in frames], ignore_index=True),
        crs="EPSG:4326",
    )
    folium.GeoJson(
        outlines,
        name="Outlines",
        style_function=lambda _: {**OUTLINE_STYLE, "fill": False},
    ).add_to(m)


LAYER_BUILDERS = {
    "polygon": _add_fills,
    "line": _add_lines,
    "point": _add_points,
}


def build_map(frames, selected, view=None):
    # view is a Quick Zoom preset {"lat", "lon", "zoom"}; otherwise centre on the drawn layers
    keys = [key for key in selected_keys(selected) if key in frames]
    active = {key: frames[key] for key in keys}

    if view is not None:
        location, zoom = [view["lat"], view["lon"]], view["zoom"]
    else:
        location, zoom = list(map_center(active.values())), DEFAULT_ZOOM

    m = folium.Map(location=location, zoom_start=zoom, tiles=TILES, zoom_snap=0.5)

    polygons = []
    for key in keys:
        frame = active[key]
        if frame.empty:
            continue
        kind = DATASETS[key]["kind"]
        LAYER_BUILDERS[kind](m, key, frame)
        if kind == "polygon":
            polygons.append(frame)

    # Single outline layer drawn over all filled datasets
    if polygons:
        _add_outlines(m, polygons)

    body = legend_html(keys)
    if body:
        m.add_child(MapLegend(body))

    logger.debug("Rendered map with layers %s at %s (zoom %s)", keys, location, zoom)
    return m


def map_html(m):
    # Full standalone page, embedded in an iframe by the app
    return m.get_root().render()
