from __future__ import annotations

from pathlib import Path

from cakeaudit.domain import Cake, Ingredient, RecipeCollection
from cakeaudit.recipe_diff import diff_recipes, format_change


def write_global_config(home: Path, content: str) -> Path:
    cfg_dir = home / ".config" / "cakeaudit"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


def write_project_config(project: Path, content: str) -> Path:
    project.mkdir(parents=True, exist_ok=True)
    path = project / "cakeaudit.toml"
    path.write_text(content, encoding="utf-8")
    return path


def cake(name: str, time: str = "10 min", *ingredients: tuple[str, ...]) -> Cake:
    return Cake(name=name, time=time, ingredients=tuple(Ingredient(*spec) for spec in ingredients))


def collection(*cakes: Cake) -> RecipeCollection:
    return RecipeCollection(cakes=tuple(cakes))


def diff_report(old: RecipeCollection, new: RecipeCollection) -> list[str]:
    return [format_change(change) for change in diff_recipes(old, new)]


def sorted_collection(value: RecipeCollection) -> RecipeCollection:
    """Cakes and ingredients sorted by name, so reorderings compare equal."""
    cakes = []
    for item in sorted(value.cakes, key=lambda c: c.name):
        ingredients = tuple(sorted(item.ingredients, key=lambda i: i.name))
        cakes.append(Cake(name=item.name, time=item.time, ingredients=ingredients))
    return RecipeCollection(cakes=tuple(cakes))
