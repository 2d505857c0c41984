"""
Sandbox script for trying the meal browser core against the live TheMealDB API.

This script loads the filter controls, resolves a one-filter and a two-filter
selection, and prints the detail of the first shared meal. It talks to
TheMealDB directly (no backend needed).

Prerequisites:
- Network access to www.themealdb.com
- Optional: MEALDB_BASE_URL / MEALDB_API_KEY in .env

Run:
    python -m sandbox.sandbox_mealdb
"""

import api.config  # noqa: F401

from pprint import pprint

from mealbrowser.connectors.mealdb_connector import MealDBConnector
from mealbrowser.controls import load_controls
from mealbrowser.detail import lookup_meal
from mealbrowser.models import FilterSelection, MealList
from mealbrowser.reconcile import resolve


def run():
    """Resolve Italian, then Italian + Seafood, and show one meal."""
    connector = MealDBConnector()

    print("=" * 80)
    print("Loading controls")
    print("=" * 80)
    controls = load_controls(connector)
    print(f"Areas ({len(controls.areas)}): {', '.join(controls.areas)}")
    print(f"Categories ({len(controls.categories) - 1}): {', '.join(controls.categories[1:])}")

    for selection in (
        FilterSelection(area="Italian"),
        FilterSelection(area="Italian", category="Seafood"),
    ):
        print("\n" + "=" * 80)
        print(f"Resolving area={selection.area!r} category={selection.category!r}")
        print("=" * 80)
        outcome = resolve(selection, connector)
        print(f"Outcome: {outcome.kind}")
        if isinstance(outcome, MealList):
            for i, meal in enumerate(outcome.meals, 1):
                print(f"{i:2d}. [{meal.id}] {meal.name}")

    if isinstance(outcome, MealList) and outcome.meals:
        meal = lookup_meal(outcome.meals[0].id, connector)
        print("\n=== Detail of first shared meal ===")
        pprint(meal.model_dump(exclude={"instructions"}))
        for line in meal.ingredient_lines:
            print(f"  - {line}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    run()
