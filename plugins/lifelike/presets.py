"""
Life-like Rule Presets

Each preset names a threshold rule known to produce interesting behaviour
and the grid dimensionality it was designed for. Rules are written in
B/S notation with contiguous neighbour ranges (see life.parse_rule).
"""

PRESETS = {
    # =====================================================================
    # 2D (8 neighbours)
    # =====================================================================
    "conway": {
        "dimensions": 2,
        "name": "Conway's Life",
        "description": "Classic B3/S23 - gliders, oscillators, still lifes",
        "rule": "B3/S23",
    },
    "maze": {
        "dimensions": 2,
        "name": "Maze",
        "description": "Grows corridors that fill the grid with a maze",
        "rule": "B3/S12345",
    },
    "mazectric": {
        "dimensions": 2,
        "name": "Mazectric",
        "description": "Maze variant with longer, straighter corridors",
        "rule": "B3/S1234",
    },
    "coral": {
        "dimensions": 2,
        "name": "Coral",
        "description": "Slow coral-like growth from any seed",
        "rule": "B3/S45678",
    },
    "life_without_death": {
        "dimensions": 2,
        "name": "Life without Death",
        "description": "Cells never die; ladders grow from random soup",
        "rule": "B3/S012345678",
    },
    # =====================================================================
    # 3D (26 neighbours)
    # =====================================================================
    "cubic": {
        "dimensions": 3,
        "name": "Cubic Life",
        "description": "Dense 3D rule: survive on 6-10, born on 9-10",
        "rule": "B9-10/S6-10",
    },
    "bays_4555": {
        "dimensions": 3,
        "name": "Life 4555",
        "description": "Bays' 3D Life - survive on 4-5, born on 5",
        "rule": "B5/S45",
    },
    "bays_5766": {
        "dimensions": 3,
        "name": "Life 5766",
        "description": "Bays' 3D Life - survive on 5-7, born on 6",
        "rule": "B6/S567",
    },
}

PRESET_ORDER = [
    "conway", "maze", "mazectric", "coral", "life_without_death",
    "cubic", "bays_4555", "bays_5766",
]

# Rule used when a game is built without explicit thresholds
DEFAULT_PRESETS = {
    2: "conway",
    3: "cubic",
}


def get_preset(name):
    """Get a preset by name. Returns None if not found."""
    return PRESETS.get(name)


def default_preset_for(dimensions):
    """Default preset for a dimensionality, or None if there is none."""
    key = DEFAULT_PRESETS.get(dimensions)
    return PRESETS.get(key) if key else None


def list_presets(dimensions=None):
    """Return list of (key, name, description) for presets.
    If dimensions is specified, filter to that dimensionality only."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"])
            for k in PRESET_ORDER
            if dimensions is None or PRESETS[k]["dimensions"] == dimensions]
