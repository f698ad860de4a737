from typing import Optional


# Where to find a retainer vocate in each city that has its own market tax rate. Keys
# are lower case so lookups can ignore the casing universalis uses.
RETAINER_LOCATIONS = {
    "limsa lominsa": "Frydwyb (Limsa Lominsa Lower Decks 8.3,11.5)",
    "gridania": "Parnell (Old Gridania 14.6,9.3)",
    "ul'dah": "Chachabi (Ul'dah - Steps of Thal 13.3,9.7)",
    "ishgard": "Prunilla (The Pillars 8.1,10.9)",
    "kugane": "Kazashi (Kugane 11.6,12.1)",
    "crystarium": "Misfrith (The Crystarium 10.4,13.1)",
    "old sharlayan": "Tanine (Old Sharlayan 12.6,10.8)",
    "tuliyollal": "Wuk Ty'ukuk (Tuliyollal 12.7,13.1)",
}


def retainer_location(location: str) -> Optional[str]:
    """Look up the retainer spot for a market location. ``None`` if we don't know it."""
    return RETAINER_LOCATIONS.get(location.strip().lower())
