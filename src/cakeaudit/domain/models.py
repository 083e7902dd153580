from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Ingredient:
    name: str
    count: str
    unit: str = ""


@dataclass(frozen=True)
class Cake:
    name: str
    time: str = ""
    ingredients: tuple[Ingredient, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RecipeCollection:
    cakes: tuple[Cake, ...] = field(default_factory=tuple)


def find_duplicate_names(collection: RecipeCollection) -> list[str]:
    problems: list[str] = []
    seen_cakes: set[str] = set()
    for cake in collection.cakes:
        if cake.name in seen_cakes:
            problems.append(f"duplicate cake {cake.name!r}")
        seen_cakes.add(cake.name)
        seen_ingredients: set[str] = set()
        for ingredient in cake.ingredients:
            if ingredient.name in seen_ingredients:
                problems.append(f"duplicate ingredient {ingredient.name!r} in cake {cake.name!r}")
            seen_ingredients.add(ingredient.name)
    return problems
