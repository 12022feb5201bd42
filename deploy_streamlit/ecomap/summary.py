"""Tabular and chart summaries of a single dataset for the dashboard."""
import altair as alt  # Charting
import numpy as np
import pandas as pd

from ecomap.config import DATASETS, HOTEL_MARKER, LULC_CLASSES, LULC_DEFAULT_LABEL, PLANT_DEFAULT_DENSITY, ROAD_STYLE
from ecomap.geometry import ring_centroid
from ecomap.styling import FILL_COLUMN, HOVER_COLUMN, first_present, lulc_code

# category: axis label, measure: candidate numeric columns summed per category
SUMMARY_SPECS = {
    "plants": {"category": "Density", "measure": ("st_areashape",), "measure_label": "Area"},
    "habitat": {"category": "Island", "measure": ("acres",), "measure_label": "Acres"},
    "urban": {"category": "Urban Area", "measure": ("POP", "pop"), "measure_label": "Population"},
    "roads": {"category": "Layer", "measure": (), "measure_label": None},
    "hotels": {"category": "Island", "measure": (), "measure_label": None},
    "lulc": {"category": "Land Cover", "measure": ("st_areashape",), "measure_label": "Area"},
    "parks": {"category": "Island", "measure": ("gis_acre",), "measure_label": "Acres"},
}

FALLBACK_COLORS = {
    "hotels": HOTEL_MARKER["color"],
    "roads": ROAD_STYLE["color"],
}


def _category(key, props):
    if key == "plants":
        return str(first_present(props, "density", default=PLANT_DEFAULT_DENSITY))
    if key == "lulc":
        return LULC_CLASSES.get(lulc_code(props.get("landcover")), (LULC_DEFAULT_LABEL,))[0]
    if key == "urban":
        return str(first_present(props, "NAMELSAD20", "namelsad20", "NAME20", "name20", default="Urban Area"))
    if key in ("habitat", "parks", "hotels"):
        return str(first_present(props, "island", default="Unknown")) or "Unknown"
    return DATASETS[key]["label"]


def summarize(frame, key):
    """One row per category with feature count, summed measure and display colour."""
    if key not in SUMMARY_SPECS:
        raise KeyError(f"Unknown dataset '{key}'")
    spec = SUMMARY_SPECS[key]
    columns = ["Category", "Features"] + ([spec["measure_label"]] if spec["measure_label"] else []) + ["Color"]
    if frame.empty:
        return pd.DataFrame(columns=columns)

    props = frame.drop(columns=frame.geometry.name).to_dict(orient="records")
    rows = pd.DataFrame({
        "Category": [_category(key, p) for p in props],
        "Color": [p.get(FILL_COLUMN) or FALLBACK_COLORS.get(key, "#cccccc") for p in props],
    })
    measure_col = next((c for c in spec["measure"] if c in frame.columns), None)
    if spec["measure_label"]:
        values = frame[measure_col] if measure_col else pd.Series(np.nan, index=frame.index)
        rows[spec["measure_label"]] = pd.to_numeric(values, errors="coerce").to_numpy()

    aggregations = {"Features": ("Color", "size"), "Color": ("Color", "first")}
    if spec["measure_label"]:
        aggregations[spec["measure_label"]] = (spec["measure_label"], "sum")
    summary = rows.groupby("Category", sort=False).agg(**aggregations).reset_index()

    sort_col = spec["measure_label"] or "Features"
    summary = summary.sort_values(sort_col, ascending=False, kind="stable").reset_index(drop=True)
    return summary[columns]


def summary_chart(frame, key):
    """Horizontal bar chart of `summarize`, bars coloured like the map."""
    summary = summarize(frame, key)
    spec = SUMMARY_SPECS[key]
    value = spec["measure_label"] or "Features"
    tooltip = ["Category", "Features"]
    if spec["measure_label"]:
        tooltip.append(alt.Tooltip(value, format=",.2f"))

    return alt.Chart(summary).mark_bar().encode(
        x=alt.X(f"{value}:Q", title=value),
        y=alt.Y("Category:N", sort="-x", title=spec["category"]),
        color=alt.Color("Color:N", scale=None, legend=None),
        tooltip=tooltip,
    ).properties(
        title=f"{DATASETS[key]['label']}: {value} by {spec['category']}",
        height=max(120, 22 * len(summary)),
    )


def attribute_table(frame):
    """Feature attributes without geometry, plus the hover-anchor coordinates."""
    anchors = [ring_centroid(geom) for geom in frame.geometry]
    table = pd.DataFrame(frame.drop(columns=[frame.geometry.name, FILL_COLUMN, HOVER_COLUMN], errors="ignore"))
    table.insert(0, "centroid_lat", [a[0] if a else np.nan for a in anchors])
    table.insert(1, "centroid_lon", [a[1] if a else np.nan for a in anchors])

    numeric_cols = table.select_dtypes(include=[np.number]).columns
    table[numeric_cols] = table[numeric_cols].round(3)
    return table
