import math

import geopandas as gpd
import pytest
from shapely.geometry import Point, box

from ecomap import styling
from ecomap.config import URBAN_PALETTE


def _frame(**columns):
    size = len(next(iter(columns.values())))
    geometry = [box(i, i, i + 1, i + 1) for i in range(size)]
    return gpd.GeoDataFrame(columns, geometry=geometry, crs='EPSG:4326')


@pytest.mark.parametrize(
    'value, expected',
    [
        (1234, '1,234'),
        (1234.5, '1,234.5'),
        (1234.5678, '1,234.568'),
        (2.0004, '2'),
        (0.12345, '0.123'),
        (None, 'N/A'),
        (math.nan, 'N/A'),
        ('n/a', 'n/a'),
    ],
)
def test_format_number(value, expected):
    assert styling.format_number(value) == expected


def test_plant_colors_fall_back_to_default():
    gdf = _frame(density=['L', None, 'X'], st_areashape=[1234.5678, 1.0, 2.0], st_perimetershape=[None, 3.0, 4.0])

    styled = styling.style_plants(gdf)

    assert list(styled['fillColor']) == ['#a6cee3', '#d9d9d9', '#cccccc']
    assert styled['hoverText'][0] == 'Density: L<br>Area: 1,234.568<br>Perimeter: N/A'
    assert styled['hoverText'][1].startswith('Density: O<br>')
    assert 'fillColor' not in gdf.columns


def test_habitat_hover_and_island_colors():
    gdf = _frame(island=['Oahu', 'Niihau'], acres=[2500.0, None])

    styled = styling.style_habitat(gdf)

    assert list(styled['fillColor']) == ['#33a02c', '#a6cee3']
    assert styled['hoverText'][0] == (
        'Island: Oahu<br>Critical Habitat: N/A<br>Acres: 2,500<br>Area: N/A<br>Perimeter: N/A'
    )
    assert 'Acres: N/A' in styled['hoverText'][1]


def test_urban_palette_follows_first_appearance():
    gdf = _frame(GEOID20=['A', 'B', 'A', None], geoid20=[None, None, None, None])

    styled = styling.style_urban(gdf)

    colors = list(styled['fillColor'])
    assert colors[0] == URBAN_PALETTE[0]
    assert colors[1] == URBAN_PALETTE[1]
    assert colors[2] == colors[0]
    assert colors[3] == URBAN_PALETTE[2]


def test_urban_palette_wraps():
    ids = [f'id-{i}' for i in range(len(URBAN_PALETTE) + 1)]

    styled = styling.style_urban(_frame(GEOID20=ids))

    assert styled['fillColor'].iloc[-1] == URBAN_PALETTE[0]


def test_urban_hover_only_lists_present_figures():
    gdf = _frame(
        GEOID20=['89770', None],
        geoid20=[None, '43700'],
        NAMELSAD20=['Urban Honolulu', None],
        name20=[None, 'Kahului'],
        POP=[853252.0, None],
        POPDEN=[5432.1, None],
    )

    styled = styling.style_urban(gdf)

    assert styled['hoverText'][0] == (
        'Urban Area: Urban Honolulu<br>GEOID20: 89770<br>Population: 853,252<br>Density: 5432.1 people/sq mi'
    )
    assert styled['hoverText'][1] == 'Urban Area: Kahului<br>GEOID20: 43700'


def test_hotel_name_fallbacks():
    gdf = gpd.GeoDataFrame(
        {'hotel_name': ['Moana', None, None], 'NAME': [None, 'Halekulani', None]},
        geometry=[Point(0, 0), Point(1, 1), Point(2, 2)],
        crs='EPSG:4326',
    )

    styled = styling.style_hotels(gdf)

    assert list(styled['hoverText']) == ['Hotel: Moana', 'Hotel: Halekulani', 'Hotel: Hotel']


def test_lulc_codes_labels_and_defaults():
    gdf = _frame(landcover=[11.0, 42.0, 99.0], st_areashape=[5000.0, 90000.25, None])

    styled = styling.style_lulc(gdf)

    assert list(styled['fillColor']) == ['#e31a1c', '#006d2c', '#cccccc']
    assert styled['hoverText'][0] == 'Land Cover Code: 11<br>Residential<br>Area: 5,000 sq units'
    assert styled['hoverText'][2] == 'Land Cover Code: 99<br>Unknown<br>Area: N/A sq units'


def test_parks_are_uniformly_green():
    gdf = _frame(name=['Diamond Head'], type_defin=['State Monument'], island=['Oahu'], gis_acre=[475.21])

    styled = styling.style_parks(gdf)

    assert styled['fillColor'][0] == '#33a02c'
    assert styled['hoverText'][0] == 'Park: Diamond Head<br>Type: State Monument<br>Island: Oahu<br>Acres: 475.21'


def test_style_dataset_rejects_unknown_key():
    with pytest.raises(KeyError):
        styling.style_dataset('volcanoes', _frame(a=[1]))


def test_empty_frame_styles_to_empty_columns():
    empty = gpd.GeoDataFrame({'density': []}, geometry=[], crs='EPSG:4326')

    styled = styling.style_plants(empty)

    assert styled.empty
    assert {'fillColor', 'hoverText'} <= set(styled.columns)
