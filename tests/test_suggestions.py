from datetime import datetime, timezone
from types import SimpleNamespace

from services.suggestion_service import matches_pantry, suggest_recipes
from utils.date_utils import EPOCH, expires_within, parse_timestamp, timestamp_or_epoch

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def recipe(name, ingredients, created_at="2024-01-01 10:00:00"):
    return SimpleNamespace(name=name, ingredients=ingredients, created_at=created_at)


def pantry_item(name, expiration_date=None):
    return SimpleNamespace(name=name, expiration_date=expiration_date)


def names(recipes):
    return [r.name for r in recipes]


def test_exact_token_match_only():
    fried = recipe("Fried Eggs", "1-2 eggs, butter or oil, salt, pepper")
    assert not matches_pantry(fried, {"egg"})
    assert not matches_pantry(fried, {"eggs"})
    assert matches_pantry(fried, {"salt"})
    assert matches_pantry(fried, {"butter or oil"})


def test_match_is_case_insensitive():
    soup = recipe("Soup", "Carrots, Onion")
    pantry = [pantry_item("ONION")]
    assert names(suggest_recipes(pantry, [soup], now=NOW)) == ["Soup"]


def test_search_term_matches_substring():
    recipes = [recipe("Cake", "flour, sugar"), recipe("Salad", "lettuce, tomato")]
    assert names(suggest_recipes([], recipes, search="FLO", now=NOW)) == ["Cake"]
    assert suggest_recipes([], recipes, now=NOW) == []
    assert suggest_recipes([], recipes, search="", now=NOW) == []


def test_newest_first():
    recipes = [
        recipe("Old", "salt", "2023-01-01 10:00:00"),
        recipe("New", "salt", "2023-09-01 10:00:00"),
        recipe("Middle", "salt", "2023-05-01T10:00:00Z"),
    ]
    assert names(suggest_recipes([pantry_item("salt")], recipes, now=NOW)) == ["New", "Middle", "Old"]


def test_unparseable_creation_time_sorts_last():
    recipes = [recipe("Broken", "salt", "yesterday"), recipe("Dated", "salt", "2020-01-01")]
    assert names(suggest_recipes([pantry_item("salt")], recipes, now=NOW)) == ["Dated", "Broken"]


def test_expiring_pantry_does_not_reorder():
    recipes = [
        recipe("Old", "milk", "2023-01-01 10:00:00"),
        recipe("New", "salt", "2023-09-01 10:00:00"),
    ]
    fresh = [pantry_item("milk", "2030-01-01"), pantry_item("salt")]
    expiring = [pantry_item("milk", "2024-06-03"), pantry_item("salt")]
    assert names(suggest_recipes(fresh, recipes, now=NOW)) == ["New", "Old"]
    assert names(suggest_recipes(expiring, recipes, now=NOW)) == ["New", "Old"]


def test_expires_within_window():
    assert expires_within("2024-06-05", 7, NOW)
    assert expires_within("2024-05-01", 7, NOW)
    assert not expires_within("2024-07-01", 7, NOW)
    assert not expires_within("soon", 7, NOW)
    assert not expires_within(None, 7, NOW)


def test_timestamp_parsing():
    assert parse_timestamp("2023-01-01 10:00:00") == datetime(2023, 1, 1, 10, tzinfo=timezone.utc)
    assert parse_timestamp("2023-01-01T10:00:00+02:00") == datetime(2023, 1, 1, 8, tzinfo=timezone.utc)
    assert parse_timestamp("") is None
    assert timestamp_or_epoch("garbage") == EPOCH


def test_timestamp_parsing_accepts_loose_iso_variants():
    assert parse_timestamp("2023-01-01T10:00:00.5Z") == datetime(2023, 1, 1, 10, 0, 0, 500000, tzinfo=timezone.utc)
    assert parse_timestamp("2023-01-01T12:00:00+0200") == datetime(2023, 1, 1, 10, tzinfo=timezone.utc)
    assert timestamp_or_epoch("2023-01-01T10:00:00.1234Z") != EPOCH
