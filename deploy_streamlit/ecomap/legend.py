"""Categorical legend panel for the active map layers."""
from branca.element import MacroElement, Template

from ecomap.config import (
    DATASETS,
    HABITAT_DEFAULT_COLOR,
    HOTEL_MARKER,
    ISLAND_COLORS,
    LULC_CATEGORIES,
    LULC_CLASSES,
    PARK_COLOR,
    PLANT_DENSITY_COLORS,
    ROAD_STYLE,
)

LEGEND_TEMPLATE = Template("""
<div class="ecomap-legend" style="position: fixed; bottom: 20px; left: 20px; z-index: 9999;
     max-width: 300px; max-height: 70vh; overflow-y: auto; background: rgba(255,255,255,0.95);
     padding: 0.75rem; border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.25); font-size: 12px;">
{% for block in blocks %}
  <div style="font-weight: 600; font-size: 14px; border-bottom: 2px solid #333; padding-bottom: 6px; margin-bottom: 8px;">{{ block.title }}</div>
  {% for group in block.groups %}
  <div style="margin-bottom: 10px;">
    {% if group.category %}<div style="font-weight: 600; font-size: 11px; color: #555; margin-bottom: 4px;">{{ group.category }}</div>{% endif %}
    {% for entry in group.entries %}
    <div style="display: flex; align-items: center; gap: 8px; margin-bottom: 3px; padding-left: 8px;">
      <span style="width: 18px; height: 14px; background-color: {{ entry.color }}; border: 1px solid #333; border-radius: 2px; flex-shrink: 0;"></span>
      <span style="font-size: 10px;">{% if entry.code %}<b>{{ entry.code }}</b> - {% endif %}{{ entry.label }}</span>
    </div>
    {% endfor %}
  </div>
  {% endfor %}
{% endfor %}
</div>
""")


class MapLegend(MacroElement):
    """Fixed legend panel placed over the map."""

    _template = Template("""
        {% macro html(this, kwargs) %}
        {{ this.body }}
        {% endmacro %}
    """)

    def __init__(self, body):
        super().__init__()
        self._name = "MapLegend"
        self.body = body


def _lulc_block():
    groups = []
    for prefix, category in LULC_CATEGORIES.items():
        entries = [
            {"code": code, "label": short, "color": color}
            for code, (_, short, color) in LULC_CLASSES.items()
            if code.startswith(prefix)
        ]
        groups.append({"category": category, "entries": entries})
    return {"title": "Land Use/Cover Legend", "groups": groups}


def _plants_block():
    entries = [{"code": None, "label": density, "color": color} for density, color in PLANT_DENSITY_COLORS.items()]
    return {"title": "Threatened Plant Density", "groups": [{"category": None, "entries": entries}]}


def _habitat_block():
    entries = [{"code": None, "label": island, "color": color} for island, color in ISLAND_COLORS.items()]
    entries.append({"code": None, "label": "Other", "color": HABITAT_DEFAULT_COLOR})
    return {"title": "Critical Habitat by Island", "groups": [{"category": None, "entries": entries}]}


# Single-swatch layers share one block
FEATURE_SWATCHES = {
    "parks": PARK_COLOR,
    "roads": ROAD_STYLE["color"],
    "hotels": HOTEL_MARKER["color"],
}

BLOCK_BUILDERS = {
    "plants": _plants_block,
    "habitat": _habitat_block,
    "lulc": _lulc_block,
}


def legend_groups(selected):
    """Legend blocks for the selected layers, in catalogue order."""
    selected = set(selected)
    blocks = []
    swatches = []
    for key in DATASETS:
        if key not in selected:
            continue
        if key in BLOCK_BUILDERS:
            blocks.append(BLOCK_BUILDERS[key]())
        elif key in FEATURE_SWATCHES:
            swatches.append({"code": None, "label": DATASETS[key]["label"], "color": FEATURE_SWATCHES[key]})
    if swatches:
        blocks.append({"title": "Features", "groups": [{"category": None, "entries": swatches}]})
    return blocks


def legend_html(selected):
    """Rendered legend panel, or an empty string when nothing needs one."""
    blocks = legend_groups(selected)
    if not blocks:
        return ""
    return LEGEND_TEMPLATE.render(blocks=blocks)
