import logging

import streamlit as st
import streamlit.components.v1 as components

from ecomap import config
from ecomap.config import DATASETS, GROUP_ENVIRONMENTAL, GROUP_HUMAN, ISLAND_VIEWS, group_choices
from ecomap.datasets import load_all
from ecomap.layers import build_map, map_html, selected_keys
from ecomap.summary import attribute_table, summary_chart, summarize

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("ecomap.app")

# ==============================================================================
# CONFIGURATION
# ==============================================================================

st.set_page_config(
    layout="wide",
    page_title="Human & Environment Visualization",
)

# ==============================================================================
# DATA LOADING
# ==============================================================================

@st.cache_resource(show_spinner="Loading datasets...")
def load_datasets(data_dir):
    # Loaded once per data directory and shared across sessions
    return load_all(data_dir=data_dir, max_workers=config.MAX_WORKERS)


datasets = load_datasets(str(config.DATA_DIR))

# ==============================================================================
# SESSION STATE
# ==============================================================================

LAYER_KEYS = [f"layer_{key}" for key in DATASETS]

if "view" not in st.session_state:
    st.session_state.view = None
if "last_selection" not in st.session_state:
    st.session_state.last_selection = []


def clear_map():
    for widget_key in LAYER_KEYS:
        st.session_state[widget_key] = False
    st.session_state.view = None


def zoom_to(island):
    st.session_state.view = ISLAND_VIEWS[island]


def layer_checkboxes(group):
    chosen = []
    for key, label in group_choices(group).items():
        disabled = key in datasets.errors
        if st.checkbox(label, key=f"layer_{key}", disabled=disabled):
            chosen.append(key)
    return chosen

# ==============================================================================
# SIDEBAR
# ==============================================================================

with st.sidebar:
    st.header("Map Layers")

    with st.expander(GROUP_ENVIRONMENTAL, expanded=False):
        env_selected = layer_checkboxes(GROUP_ENVIRONMENTAL)

    with st.expander(GROUP_HUMAN, expanded=False):
        human_selected = layer_checkboxes(GROUP_HUMAN)

    st.button("Clear Map", key="clear_map", on_click=clear_map, type="primary", use_container_width=True)

    st.subheader("Quick Zoom")
    zoom_cols = st.columns(2)
    for idx, island in enumerate(ISLAND_VIEWS):
        zoom_cols[idx % 2].button(
            island,
            key=f"zoom_{island}",
            on_click=zoom_to,
            args=(island,),
            use_container_width=True,
        )

selected = selected_keys(env_selected, human_selected)

# Toggling layers re-frames the map on the selected data
if selected != st.session_state.last_selection:
    st.session_state.view = None
    st.session_state.last_selection = selected

# ==============================================================================
# PAGE
# ==============================================================================

st.title("EcoMap: Hawaiʻi’s Threatened Plants")
st.markdown("""
Explore where Hawaiʻi's **threatened and endangered plants** and **critical habitat** sit
relative to urban areas, roads, hotels, land use and state parks.

**How to use this map:**
1.  **Layer:** Switch datasets on from the *Environmental Data* and *Human Interaction* groups in the sidebar.
2.  **Inspect:** Hover over a shape or marker to see its attributes.
3.  **Focus:** Use *Quick Zoom* to jump to an island.
""")

if not datasets.ok:
    st.error(datasets.error_message())

# --- MAP ---
try:
    m = build_map(datasets.frames, selected, view=st.session_state.view)
    components.html(map_html(m), height=config.MAP_HEIGHT)
except Exception as e:
    logger.exception("Map render failed")
    st.error(f"Error loading map: {e}")

# --- LAYER SUMMARY ---
st.divider()
st.header("Layer Summary")

available = [key for key in DATASETS if key in datasets.frames]
if not available:
    st.info("No datasets are available to summarise.")
else:
    default_key = next((key for key in selected if key in available), available[0])
    summary_key = st.selectbox(
        "Dataset:",
        available,
        index=available.index(default_key),
        format_func=lambda key: DATASETS[key]["label"],
    )
    frame = datasets.frames[summary_key]

    chart_col, table_col = st.columns([8, 4])
    with chart_col:
        st.altair_chart(summary_chart(frame, summary_key), use_container_width=True)
    with table_col:
        st.metric("Features", f"{len(frame):,}")
        st.dataframe(summarize(frame, summary_key).drop(columns=["Color"]), hide_index=True)

    st.subheader("Full Data Table")
    st.dataframe(attribute_table(frame), hide_index=True)

# --- FOOTER ---
st.divider()
st.caption("Human & Environment Visualization · Final project for ICS 484")
