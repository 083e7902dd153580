from .models import Cake, Ingredient, RecipeCollection, find_duplicate_names

__all__ = [
    "Cake",
    "Ingredient",
    "RecipeCollection",
    "find_duplicate_names",
]
