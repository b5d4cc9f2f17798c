"""Create demo civilizations for development/testing."""

import shutil

from living_chronicle.storage import Storage

DEMO_CIVILIZATIONS = [
    {
        "id": "valdoria",
        "name": "Valdoria",
        "description": "A river kingdom of priests and soldiers.",
        "events": [
            {"id": "v-001", "year": 10, "title": "The Sunstone Vision", "type": "Religious",
             "category": "Spiritual", "significance": 1.0,
             "description": "The high priestess beheld the Sunstone in a dream and founded its temple."},
            {"id": "v-002", "year": 14, "title": "Border War", "type": "Military",
             "category": "Conflict", "significance": 2.5,
             "description": "Valdoran spearmen drove the hill clans back across the Ashfen."},
            {"id": "v-003", "year": 19, "title": "Second Border War", "type": "Military",
             "category": "Conflict", "significance": 2.2,
             "description": "The hill clans returned and were broken at the ford of Imre."},
            {"id": "v-004", "year": 27, "title": "Harvest Fair", "type": "Economic",
             "category": "Trade", "significance": 0.8,
             "description": "A small harvest fair was held in the capital."},
            {"id": "v-005", "year": 41, "title": "The Salt Treaty", "type": "Diplomatic",
             "category": "Diplomacy", "significance": 2.4,
             "description": "Envoys signed the Salt Treaty with the coastal league."},
            {"id": "v-006", "year": 48, "title": "The Great Flood", "type": "Natural",
             "category": "Disaster", "significance": 4.5,
             "description": "The river burst its banks and drowned the lower city."},
            {"id": "v-007", "year": 52, "title": "Rebuilding", "type": "Social",
             "category": "Recovery", "significance": 2.1,
             "description": "The survivors raised new walls on the high ground."},
        ],
    },
    {
        "id": "thalor",
        "name": "Thalor",
        "description": "A quiet mountain people whose history is mostly legend.",
        "events": [
            {"id": "t-001", "year": 3, "title": "Goat Census", "type": "Economic",
             "category": "Growth", "significance": 0.4,
             "description": "The herds were counted."},
        ],
    },
]


def create_demo_data(storage: Storage) -> None:
    """Wipe existing civilizations and create fresh demo data."""
    civ_root = storage.config_path.parent / "civilizations"
    if civ_root.exists():
        shutil.rmtree(civ_root)
    civ_root.mkdir(parents=True, exist_ok=True)

    for civ in DEMO_CIVILIZATIONS:
        storage.create_civilization(civ["id"], civ["name"], civ["description"])
        storage.append_events(civ["id"], civ["events"])
