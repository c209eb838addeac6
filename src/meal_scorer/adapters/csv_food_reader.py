"""CSV ingestion for food records.

Expected columns: ``name,kcal,protein,fat,carbs,sugar,fiber,satfat,sodium``.
The first row is a header. Quoted names may contain commas.
"""

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from meal_scorer.domain.food import Food

_FIELD_COUNT = 9

_logger = logging.getLogger(__name__)


def parse_number(text: str) -> float:
    """Parse a numeric cell; blank or malformed cells become 0.0."""
    cleaned = text.strip()
    if not cleaned:
        return 0.0
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


def read_foods(lines: Iterable[str]) -> list[Food]:
    """Parse food records from CSV lines, skipping the header row."""
    foods: list[Food] = []
    skipped = 0
    reader = csv.reader(lines)
    next(reader, None)
    for fields in reader:
        if not fields or not any(cell.strip() for cell in fields):
            continue
        if len(fields) < _FIELD_COUNT:
            skipped += 1
            continue
        kcal, protein, fat, carbs, sugar, fiber, satfat, sodium = (
            parse_number(cell) for cell in fields[1:_FIELD_COUNT]
        )
        foods.append(
            Food(
                name=fields[0],
                kcal=kcal,
                protein=protein,
                fat=fat,
                carbs=carbs,
                sugar=sugar,
                fiber=fiber,
                satfat=satfat,
                sodium=sodium,
            )
        )
    if skipped:
        _logger.debug(
            "Skipped %s rows with fewer than %s fields", skipped, _FIELD_COUNT
        )
    return foods


def load_foods(path: Path) -> list[Food]:
    """Load food records from a CSV file."""
    with path.open(encoding="utf-8", newline="") as handle:
        foods = read_foods(handle)
    _logger.info("Loaded %s food items from %s", len(foods), path)
    return foods
