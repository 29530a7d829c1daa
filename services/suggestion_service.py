"""
Zero Waste Chef Suggestion Service
Surfaces recipes that use what is already in a user's pantry
"""

from datetime import datetime
from functools import cmp_to_key
from typing import List, Optional, Protocol, Sequence, TypeVar

from utils.date_utils import expires_within, timestamp_or_epoch

INGREDIENT_SEPARATOR = ", "


class PantryItem(Protocol):
    name: str
    expiration_date: Optional[str]


class RecipeLike(Protocol):
    ingredients: str
    created_at: Optional[str]


R = TypeVar("R", bound=RecipeLike)


def recipe_tokens(ingredients: Optional[str]) -> List[str]:
    """Split a stored ingredient string into lowercase tokens"""
    return (ingredients or "").lower().split(INGREDIENT_SEPARATOR)


def matches_pantry(recipe: RecipeLike, pantry: set, search: Optional[str] = None) -> bool:
    """
    A recipe matches when one of its tokens is exactly a pantry name, or
    contains the search term. "eggs" does not match a pantry "egg".
    """
    needle = search.lower() if search else None
    for token in recipe_tokens(recipe.ingredients):
        if token in pantry:
            return True
        if needle and needle in token:
            return True
    return False


def has_expiring_items(items: Sequence[PantryItem], window_days: int, now: Optional[datetime] = None) -> bool:
    return any(expires_within(item.expiration_date, window_days, now) for item in items)


def suggest_recipes(
    pantry_items: Sequence[PantryItem],
    recipes: Sequence[R],
    search: Optional[str] = None,
    window_days: int = 7,
    now: Optional[datetime] = None
) -> List[R]:
    """
    Filter and order recipes for one user's pantry

    Ordering puts an "expiring" user's recipes first and then sorts newest
    first. The expiring flag belongs to the user, not to a recipe, so both
    sides of every comparison get the same value and only the creation time
    ever decides the order.
    """
    pantry = {item.name.lower() for item in pantry_items}
    kept = [recipe for recipe in recipes if matches_pantry(recipe, pantry, search)]

    user_expiring = has_expiring_items(pantry_items, window_days, now)

    def compare(a: R, b: R) -> int:
        a_expiring = user_expiring
        b_expiring = user_expiring
        if a_expiring == b_expiring:
            a_date = timestamp_or_epoch(a.created_at)
            b_date = timestamp_or_epoch(b.created_at)
            if a_date == b_date:
                return 0
            return -1 if a_date > b_date else 1
        return -1 if a_expiring else 1

    return sorted(kept, key=cmp_to_key(compare))
