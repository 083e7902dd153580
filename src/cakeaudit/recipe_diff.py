"""Semantic diff of two recipe collections.

Records come out in a fixed order: added cakes (new order), removed cakes
(old order), then for every shared cake in old order its time change,
added ingredients (new order), removed ingredients (old order) and the
count/unit changes of shared ingredients (old order).

Names are matched exactly. When a collection repeats a cake or ingredient
name, the last occurrence is the one compared.
"""

from __future__ import annotations

from dataclasses import dataclass

from .domain import Cake, Ingredient, RecipeCollection


ADDED_CAKE = "added_cake"
REMOVED_CAKE = "removed_cake"
CHANGED_TIME = "changed_time"
ADDED_INGREDIENT = "added_ingredient"
REMOVED_INGREDIENT = "removed_ingredient"
CHANGED_COUNT = "changed_count"
ADDED_UNIT = "added_unit"
REMOVED_UNIT = "removed_unit"
CHANGED_UNIT = "changed_unit"

TEMPLATES = {
    ADDED_CAKE: 'ADDED cake "{cake}"',
    REMOVED_CAKE: 'REMOVED cake "{cake}"',
    CHANGED_TIME: 'CHANGED cooking time for cake "{cake}" - "{new}" instead of "{old}"',
    ADDED_INGREDIENT: 'ADDED ingredient "{ingredient}" for cake "{cake}"',
    REMOVED_INGREDIENT: 'REMOVED ingredient "{ingredient}" for cake "{cake}"',
    CHANGED_COUNT: (
        'CHANGED unit count for ingredient "{ingredient}" for cake "{cake}" - "{new}" instead of "{old}"'
    ),
    ADDED_UNIT: 'ADDED unit "{new}" for ingredient "{ingredient}" for cake "{cake}"',
    REMOVED_UNIT: 'REMOVED unit "{old}" for ingredient "{ingredient}" for cake "{cake}"',
    CHANGED_UNIT: 'CHANGED unit for ingredient "{ingredient}" for cake "{cake}" - "{new}" instead of "{old}"',
}


@dataclass(frozen=True)
class Change:
    kind: str
    cake: str
    ingredient: str | None = None
    old: str | None = None
    new: str | None = None


def format_change(change: Change) -> str:
    return TEMPLATES[change.kind].format(
        cake=change.cake,
        ingredient=change.ingredient,
        old=change.old,
        new=change.new,
    )


def diff_recipes(old: RecipeCollection, new: RecipeCollection) -> list[Change]:
    old_cakes = {cake.name: cake for cake in old.cakes}
    new_cakes = {cake.name: cake for cake in new.cakes}

    changes: list[Change] = []
    for cake in new.cakes:
        if cake.name not in old_cakes:
            changes.append(Change(ADDED_CAKE, cake.name))
    for cake in old.cakes:
        if cake.name not in new_cakes:
            changes.append(Change(REMOVED_CAKE, cake.name))

    for name in _shared_names(old.cakes, new_cakes):
        changes.extend(_diff_cake(old_cakes[name], new_cakes[name]))
    return changes


def _shared_names(items: tuple[Cake, ...] | tuple[Ingredient, ...], other: dict) -> list[str]:
    # Old order, first occurrence of each duplicated name.
    return [name for name in dict.fromkeys(item.name for item in items) if name in other]


def _diff_cake(old: Cake, new: Cake) -> list[Change]:
    changes: list[Change] = []
    if old.time != new.time:
        changes.append(Change(CHANGED_TIME, old.name, old=old.time, new=new.time))

    old_items = {item.name: item for item in old.ingredients}
    new_items = {item.name: item for item in new.ingredients}
    for item in new.ingredients:
        if item.name not in old_items:
            changes.append(Change(ADDED_INGREDIENT, old.name, ingredient=item.name))
    for item in old.ingredients:
        if item.name not in new_items:
            changes.append(Change(REMOVED_INGREDIENT, old.name, ingredient=item.name))

    for name in _shared_names(old.ingredients, new_items):
        changes.extend(_diff_ingredient(old.name, old_items[name], new_items[name]))
    return changes


def _diff_ingredient(cake: str, old: Ingredient, new: Ingredient) -> list[Change]:
    changes: list[Change] = []
    if old.count != new.count:
        changes.append(Change(CHANGED_COUNT, cake, ingredient=old.name, old=old.count, new=new.count))

    if old.unit == new.unit:
        return changes
    if not old.unit:
        changes.append(Change(ADDED_UNIT, cake, ingredient=old.name, new=new.unit))
    elif not new.unit:
        changes.append(Change(REMOVED_UNIT, cake, ingredient=old.name, old=old.unit))
    else:
        changes.append(Change(CHANGED_UNIT, cake, ingredient=old.name, old=old.unit, new=new.unit))
    return changes
