from __future__ import annotations
from typing import Tuple

# (name, description), in order from the first new moon after the winter solstice
LUNATION_INFO: Tuple[Tuple[str, str], ...] = (
    ("Wolf Moon", "Howling in deep winter, marking the year's start."),
    ("Snow Moon", "Quiet reflection amid icy calm."),
    ("Storm Moon", "Heralding fierce, late-winter storms."),
    ("Worm Moon", "Signaling the first stirrings of renewal."),
    ("Seed Moon", "When hope is sown and new growth begins."),
    ("Flower Moon", "Celebrating blooming life in spring."),
    ("Honey Moon", "Early summer warmth and fruitful days."),
    ("Thunder Moon", "The intense, stormy heart of summer."),
    ("Corn Moon", "Crops ripen as autumn approaches."),
    ("Harvest Moon", "Bounty of early autumn reaping the earth's gifts."),
    ("Ancestor’s Moon", "A time for remembrance and ancestral wisdom."),
    ("Frost Moon", "A delicate chill as the year winds down."),
    ("Hecate’s Moon", "The secret, transformative moon that closes the cycle."),
)

# 8-day planetary week, day 0 at the week epoch
PLANET_WEEK_DAYS: Tuple[str, ...] = (
    "Mercva",
    "Venuva",
    "Earava",
    "Marva",
    "Jupva",
    "Saturva",
    "Urava",
    "Neptuva",
)
