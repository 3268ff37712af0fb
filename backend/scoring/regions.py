"""Region-keyed health estimates used when measured indicators are missing.

Keys are REST Countries subregion or region names. Every table carries a
"default" entry so a lookup never comes back empty.
"""

from types import MappingProxyType

REGION_LIFE_EXPECTANCY = MappingProxyType({
    "Europe": 78,
    "Northern America": 78,
    "Oceania": 75,
    "South America": 74,
    "Central America": 73,
    "Caribbean": 72,
    "Eastern Asia": 76,
    "South-Eastern Asia": 72,
    "Western Asia": 74,
    "Southern Asia": 69,
    "Central Asia": 71,
    "Northern Africa": 72,
    "Western Africa": 58,
    "Eastern Africa": 62,
    "Southern Africa": 64,
    "Middle Africa": 58,
    "Antarctica": 75,
    "default": 70,
})

# Healthcare quality proxy, already on the 0-100 scale.
REGION_HEALTHCARE_PROXY = MappingProxyType({
    "Europe": 85,
    "Northern America": 80,
    "Oceania": 78,
    "Eastern Asia": 77,
    "South America": 65,
    "South-Eastern Asia": 60,
    "Western Asia": 68,
    "Southern Asia": 50,
    "Central Asia": 55,
    "Northern Africa": 58,
    "Western Africa": 38,
    "Eastern Africa": 40,
    "Southern Africa": 55,
    "Middle Africa": 35,
    "Caribbean": 62,
    "Central America": 60,
    "default": 55,
})

for _table in (REGION_LIFE_EXPECTANCY, REGION_HEALTHCARE_PROXY):
    assert "default" in _table


def lookup_region(table, subregion: str | None, region: str | None) -> float:
    """Subregion first, then region, then the table's default."""
    for key in (subregion, region):
        if key and key in table:
            return table[key]
    return table["default"]
