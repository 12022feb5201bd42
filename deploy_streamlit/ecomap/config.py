import os
from pathlib import Path

# ==============================================================================
# PATHS & RUNTIME OVERRIDES
# ==============================================================================

APP_DIR = Path(__file__).resolve().parents[1]
DATA_DIR = os.environ.get("ECOMAP_DATA_DIR", str(APP_DIR / "datasets"))
MAX_WORKERS = int(os.environ.get("ECOMAP_MAX_WORKERS", 7))
TILES = os.environ.get("ECOMAP_TILES", "OpenStreetMap")
LOG_LEVEL = os.environ.get("ECOMAP_LOG_LEVEL", "INFO")

# ==============================================================================
# MAP DEFAULTS
# ==============================================================================

# (lat, lon) used when no layer is selected
DEFAULT_CENTER = (20.7, -156.0)
DEFAULT_ZOOM = 8
MAP_HEIGHT = 700  # px, height of the embedded map

OUTLINE_STYLE = {"color": "black", "weight": 1}
ROAD_STYLE = {"color": "#000000", "weight": 1}
HOTEL_MARKER = {"radius": 4, "color": "red", "fill_color": "red"}

# Quick Zoom presets
ISLAND_VIEWS = {
    "Oahu": {"lat": 21.4389, "lon": -158.0001, "zoom": 9.5},
    "Maui": {"lat": 20.7984, "lon": -156.3319, "zoom": 9.5},
    "Hawaii": {"lat": 19.5429, "lon": -155.6659, "zoom": 8.5},
    "Kauai": {"lat": 22.0964, "lon": -159.5261, "zoom": 9.5},
    "Molokai": {"lat": 21.1444, "lon": -157.0226, "zoom": 10},
    "Lanai": {"lat": 20.8283, "lon": -156.9197, "zoom": 10.5},
    "Kahoolawe": {"lat": 20.5497, "lon": -156.6034, "zoom": 11},
    "Niihau": {"lat": 21.9024, "lon": -160.1669, "zoom": 10.5},
    "All": {"lat": 20.7, "lon": -157.0, "zoom": 7},
}

# ==============================================================================
# DATASET CATALOGUE
# ==============================================================================

GROUP_ENVIRONMENTAL = "Environmental Data"
GROUP_HUMAN = "Human Interaction"

# Order here is the draw order on the map.
DATASETS = {
    "plants": {
        "file": "Threatened-Endangered_Plants.geojson",
        "group": GROUP_ENVIRONMENTAL,
        "label": "Plant Layer",
        "kind": "polygon",
        "opacity": 0.55,
    },
    "habitat": {
        "file": "Areas_of_Critical_Habitat_(Consolidated).geojson",
        "group": GROUP_ENVIRONMENTAL,
        "label": "Habitat Layer",
        "kind": "polygon",
        "opacity": 0.55,
    },
    "urban": {
        "file": "2020_Urban_Areas.geojson",
        "group": GROUP_HUMAN,
        "label": "Urban Areas",
        "kind": "polygon",
        "opacity": 0.45,
    },
    "roads": {
        "file": "roads_simplified.json",
        "group": GROUP_HUMAN,
        "label": "Roads",
        "kind": "line",
        "opacity": None,
    },
    "hotels": {
        "file": "Hotels.geojson",
        "group": GROUP_HUMAN,
        "label": "Hotels",
        "kind": "point",
        "opacity": None,
    },
    "lulc": {
        "file": "Land_Use_Land_Cover_(LULC).geojson",
        "group": GROUP_HUMAN,
        "label": "Land Use/Cover",
        "kind": "polygon",
        "opacity": 0.5,
    },
    "parks": {
        "file": "State_Parks.geojson",
        "group": GROUP_ENVIRONMENTAL,
        "label": "State Parks",
        "kind": "polygon",
        "opacity": 0.6,
    },
}


def group_choices(group):
    """Checkbox choices ({key: label}) for one sidebar group, in catalogue order."""
    return {key: cfg["label"] for key, cfg in DATASETS.items() if cfg["group"] == group}


# ==============================================================================
# COLOUR & LABEL TABLES
# ==============================================================================

PLANT_DENSITY_COLORS = {
    "O": "#d9d9d9",
    "L": "#a6cee3",
    "M": "#1f78b4",
    "H": "#b2df8a",
    "VH": "#33a02c",
    "OLO": "#fb9a99",
}
PLANT_DEFAULT_DENSITY = "O"
PLANT_DEFAULT_COLOR = "#cccccc"

ISLAND_COLORS = {
    "Hawaii": "#1f78b4",
    "Oahu": "#33a02c",
    "Maui": "#e31a1c",
    "Kauai": "#ff7f00",
    "Molokai": "#6a3d9a",
    "Lanai": "#b15928",
}
HABITAT_DEFAULT_COLOR = "#a6cee3"

# category10 at 45% alpha
URBAN_PALETTE = [
    "rgba(31,119,180,0.45)",
    "rgba(255,127,14,0.45)",
    "rgba(44,160,44,0.45)",
    "rgba(214,39,40,0.45)",
    "rgba(148,103,189,0.45)",
    "rgba(140,86,75,0.45)",
    "rgba(227,119,194,0.45)",
    "rgba(127,127,127,0.45)",
    "rgba(188,189,34,0.45)",
    "rgba(23,190,207,0.45)",
]

PARK_COLOR = "#33a02c"
LULC_DEFAULT_COLOR = "#cccccc"
LULC_DEFAULT_LABEL = "Unknown"

# Anderson level II: code -> (full label, legend label, colour)
LULC_CLASSES = {
    "11": ("Residential", "Residential", "#e31a1c"),
    "12": ("Commercial and Services", "Commercial & Services", "#fb9a99"),
    "13": ("Industrial", "Industrial", "#984ea3"),
    "14": ("Transportation, Communications and Utilities", "Transportation & Utilities", "#a6cee3"),
    "15": ("Industrial and Commercial Complexes", "Industrial & Commercial Complexes", "#b15928"),
    "16": ("Mixed Urban or Built-up Land", "Mixed Urban or Built-up", "#cab2d6"),
    "17": ("Other Urban or Built-up Land", "Other Urban or Built-up", "#ffff99"),
    "21": ("Cropland and Pasture", "Cropland & Pasture", "#fdbf6f"),
    "22": ("Orchards, Groves, Vineyards, Nurseries", "Orchards & Vineyards", "#ff7f00"),
    "23": ("Confined Feeding Operations", "Confined Feeding Operations", "#b2df8a"),
    "24": ("Other Agricultural Land", "Other Agricultural", "#33a02c"),
    "31": ("Herbaceous Rangeland", "Herbaceous Rangeland", "#ffffb3"),
    "32": ("Shrub and Brush Rangeland", "Shrub & Brush Rangeland", "#bebada"),
    "33": ("Mixed Rangeland", "Mixed Rangeland", "#fccde5"),
    "41": ("Deciduous Forest Land", "Deciduous Forest", "#238b45"),
    "42": ("Evergreen Forest Land", "Evergreen Forest", "#006d2c"),
    "43": ("Mixed Forest Land", "Mixed Forest", "#74c476"),
    "51": ("Streams and Canals", "Streams & Canals", "#08519c"),
    "52": ("Lakes", "Lakes", "#3182bd"),
    "53": ("Reservoirs", "Reservoirs", "#6baed6"),
    "54": ("Bays and Estuaries", "Bays & Estuaries", "#9ecae1"),
    "61": ("Forested Wetland", "Forested Wetland", "#2ca25f"),
    "62": ("Nonforested Wetland", "Nonforested Wetland", "#99d8c9"),
    "71": ("Dry Salt Flats", "Dry Salt Flats", "#f0f0f0"),
    "72": ("Beaches", "Beaches", "#fdd0a2"),
    "73": ("Sandy Areas Other than Beaches", "Sandy Areas", "#bdbdbd"),
    "74": ("Bare Exposed Rock", "Bare Exposed Rock", "#969696"),
    "75": ("Strip Mines, Quarries, and Gravel Pits", "Strip Mines & Quarries", "#737373"),
    "76": ("Transitional Areas", "Transitional Areas", "#525252"),
    "77": ("Mixed Barren Land", "Mixed Barren", "#252525"),
    "81": ("Shrub and Brush Tundra", "Shrub & Brush Tundra", "#efedf5"),
    "82": ("Herbaceous Tundra", "Herbaceous Tundra", "#dadaeb"),
    "83": ("Bare Ground", "Bare Ground", "#bcbddc"),
    "84": ("Wet Tundra", "Wet Tundra", "#9e9ac8"),
    "85": ("Mixed Tundra", "Mixed Tundra", "#807dba"),
    "91": ("Perennial Snowfields or Ice", "Perennial Snowfields or Ice", "#ffffff"),
    "92": ("Glaciers", "Glaciers", "#f7fbff"),
}

# Legend sections keyed by the first digit of the code
LULC_CATEGORIES = {
    "1": "Urban or Built-up Land",
    "2": "Agricultural Land",
    "3": "Rangeland",
    "4": "Forest Land",
    "5": "Water",
    "6": "Wetland",
    "7": "Barren Land",
    "8": "Tundra",
    "9": "Perennial Snow",
}
