"""Loading of the static map datasets.

All files are read once, in parallel, and styled before the app sees them.
A file that fails to load is reported, not fatal: the other layers stay
available.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

import geopandas as gpd

from ecomap.config import DATA_DIR, DATASETS, MAX_WORKERS
from ecomap.styling import style_dataset

logger = logging.getLogger(__name__)

WGS84 = "EPSG:4326"


class DatasetLoadError(Exception):
    """A dataset file could not be read, reprojected or styled."""

    def __init__(self, key, source, cause):
        self.key = key
        self.source = source
        self.cause = cause
        super().__init__(f"Could not load '{key}' from {source}: {cause}")


@dataclass
class LoadResult:
    frames: dict = field(default_factory=dict)
    errors: dict = field(default_factory=dict)

    @property
    def ok(self):
        return not self.errors

    def error_message(self):
        if not self.errors:
            return None
        labels = ", ".join(DATASETS[key]["label"] for key in self.errors)
        return f"Failed to load one or more GeoJSON files: {labels}"


def dataset_source(key, data_dir=DATA_DIR):
    filename = DATASETS[key]["file"]
    base = str(data_dir)
    if base.startswith(("http://", "https://")):
        return f"{base.rstrip('/')}/{filename}"
    return str(Path(base) / filename)


def load_dataset(key, data_dir=DATA_DIR):
    """Read one dataset into a GeoDataFrame in WGS84 (unstyled)."""
    if key not in DATASETS:
        raise KeyError(f"Unknown dataset '{key}'")
    source = dataset_source(key, data_dir)
    logger.info("Loading %s...", source)
    try:
        gdf = gpd.read_file(source)
        # Ensure correct projection for web maps
        if gdf.crs is not None and gdf.crs != WGS84:
            gdf = gdf.to_crs(WGS84)
    except Exception as e:
        raise DatasetLoadError(key, source, e) from e
    logger.info("Loaded %d features for %s", len(gdf), key)
    return gdf


def _load_and_style(key, data_dir):
    gdf = load_dataset(key, data_dir)
    try:
        return style_dataset(key, gdf)
    except Exception as e:
        raise DatasetLoadError(key, dataset_source(key, data_dir), e) from e


def load_all(keys=None, data_dir=DATA_DIR, max_workers=MAX_WORKERS):
    """Load and style the requested datasets (all by default) in parallel."""
    keys = list(DATASETS) if keys is None else list(keys)
    result = LoadResult()
    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as pool:
        futures = {key: pool.submit(_load_and_style, key, data_dir) for key in keys}
        for key, future in futures.items():
            try:
                result.frames[key] = future.result()
            except DatasetLoadError as e:
                logger.error("%s", e)
                result.errors[key] = str(e)
    return result
