"""Tests for CSV ingestion."""

from pathlib import Path

import pytest

from meal_scorer.adapters.csv_food_reader import load_foods, parse_number, read_foods
from meal_scorer.domain.food import Food


def test_parse_number_defaults_to_zero() -> None:
    assert parse_number("12.5") == 12.5
    assert parse_number(" 3 ") == 3.0
    assert parse_number("") == 0.0
    assert parse_number("n/a") == 0.0


def test_read_foods_skips_header_blank_and_short_rows() -> None:
    lines = [
        "name,kcal,protein,fat,carbs,sugar,fiber,satfat,sodium",
        "Apple,52,0.3,0.2,14,10,2.4,0,1",
        "",
        "Broken,1,2,3",
        '"Cheese, Cheddar",403,25,33,1.3,0.5,0,21,621',
        "Mystery,abc,,1,1,1,1,1,1",
    ]

    foods = read_foods(lines)

    assert foods == [
        Food("Apple", 52, 0.3, 0.2, 14, 10, 2.4, 0, 1),
        Food("Cheese, Cheddar", 403, 25, 33, 1.3, 0.5, 0, 21, 621),
        Food("Mystery", 0, 0, 1, 1, 1, 1, 1, 1),
    ]


def test_read_foods_ignores_extra_columns() -> None:
    lines = ["header", "Oats,389,16.9,6.9,66,1,10.6,1.2,2,extra"]

    assert read_foods(lines) == [Food("Oats", 389, 16.9, 6.9, 66, 1, 10.6, 1.2, 2)]


def test_load_foods_reads_file(csv_path: Path, foods: list[Food]) -> None:
    assert load_foods(csv_path) == foods


def test_load_foods_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_foods(tmp_path / "missing.csv")
