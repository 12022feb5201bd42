"""Per-dataset display fields.

Every styler takes a GeoDataFrame straight from disk and returns a copy with
two extra columns: ``fillColor`` (lookup table keyed on a categorical
property, with a per-dataset fallback) and ``hoverText`` (tooltip HTML).
"""
import numpy as np
import pandas as pd

from ecomap.config import (
    HABITAT_DEFAULT_COLOR,
    ISLAND_COLORS,
    LULC_CLASSES,
    LULC_DEFAULT_COLOR,
    LULC_DEFAULT_LABEL,
    PARK_COLOR,
    PLANT_DEFAULT_COLOR,
    PLANT_DEFAULT_DENSITY,
    PLANT_DENSITY_COLORS,
    URBAN_PALETTE,
)

FILL_COLUMN = "fillColor"
HOVER_COLUMN = "hoverText"


# ==============================================================================
# VALUE HELPERS
# ==============================================================================

def is_missing(value):
    if value is None:
        return True
    if isinstance(value, (list, tuple, dict, np.ndarray)):
        return False
    return bool(pd.isna(value))


def first_present(record, *names, default=None):
    """First non-missing value among `names`, else `default`."""
    for name in names:
        value = record.get(name)
        if not is_missing(value):
            return value
    return default


def format_number(value):
    """Thousands separators, at most three decimals, ``N/A`` when missing."""
    if is_missing(value):
        return "N/A"
    if isinstance(value, str) or isinstance(value, (bool, np.bool_)):
        return str(value)
    try:
        number = round(float(value), 3)
    except (TypeError, ValueError):
        return str(value)
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,}"


def format_plain(value):
    """Like `format_number` without separators, for codes and ratios."""
    if is_missing(value):
        return "N/A"
    if isinstance(value, (int, float, np.integer, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value)


def _records(frame):
    return frame.drop(columns=frame.geometry.name).to_dict(orient="records")


def _assign(frame, colors, hovers):
    styled = frame.copy()
    styled[FILL_COLUMN] = colors
    styled[HOVER_COLUMN] = hovers
    return styled


# ==============================================================================
# DATASET STYLERS
# ==============================================================================

def style_plants(frame):
    colors, hovers = [], []
    for props in _records(frame):
        density = str(first_present(props, "density", default=PLANT_DEFAULT_DENSITY))
        colors.append(PLANT_DENSITY_COLORS.get(density, PLANT_DEFAULT_COLOR))
        hovers.append(
            f"Density: {density}"
            f"<br>Area: {format_number(props.get('st_areashape'))}"
            f"<br>Perimeter: {format_number(props.get('st_perimetershape'))}"
        )
    return _assign(frame, colors, hovers)


def style_habitat(frame):
    colors, hovers = [], []
    for props in _records(frame):
        island = str(first_present(props, "island", default=""))
        colors.append(ISLAND_COLORS.get(island, HABITAT_DEFAULT_COLOR))
        hovers.append(
            f"Island: {island}"
            f"<br>Critical Habitat: {first_present(props, 'critical_h', default='N/A')}"
            f"<br>Acres: {format_number(props.get('acres'))}"
            f"<br>Area: {format_number(props.get('st_areashape'))}"
            f"<br>Perimeter: {format_number(props.get('st_perimetershape'))}"
        )
    return _assign(frame, colors, hovers)


def urban_color_map(records):
    """Palette colour per urban-area id, in order of first appearance.

    Features with no GEOID get a positional id so each still takes its own
    palette slot. The palette wraps after ten ids.
    """
    mapping = {}
    for position, props in enumerate(records):
        feature_id = _urban_id(props, position)
        if feature_id not in mapping:
            mapping[feature_id] = URBAN_PALETTE[len(mapping) % len(URBAN_PALETTE)]
    return mapping


def _urban_id(props, position):
    geoid = first_present(props, "GEOID20", "geoid20")
    if geoid is None:
        return f"gid-{position}"
    return format_plain(geoid)


def style_urban(frame):
    records = _records(frame)
    palette = urban_color_map(records)
    colors, hovers = [], []
    for position, props in enumerate(records):
        colors.append(palette[_urban_id(props, position)])
        name = first_present(props, "NAMELSAD20", "namelsad20", "NAME20", "name20", default="Urban Area")
        geoid = first_present(props, "GEOID20", "geoid20")
        text = f"Urban Area: {name}<br>GEOID20: {format_plain(geoid)}"
        pop = first_present(props, "POP", "pop")
        if pop is not None:
            text += f"<br>Population: {format_number(pop)}"
        density = first_present(props, "POPDEN", "popden")
        if density is not None:
            text += f"<br>Density: {format_plain(density)} people/sq mi"
        hovers.append(text)
    return _assign(frame, colors, hovers)


def style_hotels(frame):
    hovers = [
        f"Hotel: {first_present(props, 'hotel_name', 'name', 'NAME', default='Hotel')}"
        for props in _records(frame)
    ]
    return _assign(frame, [None] * len(hovers), hovers)


def lulc_code(value):
    """Normalise a land-cover code; numeric 11.0 becomes ``'11'``."""
    if is_missing(value):
        return ""
    return format_plain(value)


def style_lulc(frame):
    colors, hovers = [], []
    for props in _records(frame):
        code = lulc_code(props.get("landcover"))
        label, _, color = LULC_CLASSES.get(code, (LULC_DEFAULT_LABEL, None, LULC_DEFAULT_COLOR))
        colors.append(color)
        hovers.append(
            f"Land Cover Code: {code}"
            f"<br>{label}"
            f"<br>Area: {format_number(props.get('st_areashape'))} sq units"
        )
    return _assign(frame, colors, hovers)


def style_parks(frame):
    hovers = [
        f"Park: {first_present(props, 'name', default='N/A')}"
        f"<br>Type: {first_present(props, 'type_defin', default='N/A')}"
        f"<br>Island: {first_present(props, 'island', default='N/A')}"
        f"<br>Acres: {format_number(props.get('gis_acre'))}"
        for props in _records(frame)
    ]
    return _assign(frame, [PARK_COLOR] * len(hovers), hovers)


def style_roads(frame):
    # Roads are drawn as one uniform line layer.
    return frame.copy()


STYLERS = {
    "plants": style_plants,
    "habitat": style_habitat,
    "urban": style_urban,
    "roads": style_roads,
    "hotels": style_hotels,
    "lulc": style_lulc,
    "parks": style_parks,
}


def style_dataset(key, frame):
    try:
        styler = STYLERS[key]
    except KeyError:
        raise KeyError(f"No styler for dataset '{key}'") from None
    return styler(frame)
