"""
Markup rendering for the result list and the meal detail view.

All functions here are pure: they take an outcome and return an HTML string,
which the Streamlit page inserts into the results or detail region. Every piece
of provider or user supplied text (meal names, areas, categories, ingredients,
error messages, ids and URLs in attributes) is escaped with escape_html, so
nothing coming from the catalog is ever interpreted as markup.

The list view switches on the outcome variant:
- no_selection -> filter prompt
- loading      -> skeleton cards
- no_results   -> "No results for ..." naming the active filter(s)
- error        -> error message with the failure text
- results      -> grid of cards, each keyed by its meal id
"""

from typing import List

from mealbrowser.models import (
    DetailLoading,
    DetailOutcome,
    Failed,
    FilterSelection,
    ListOutcome,
    Loading,
    MealDetail,
    MealFound,
    MealList,
    MealNotFound,
    MealSummary,
    NoResults,
    NoSelection,
)
from mealbrowser.utils.text import escape_html, escape_multiline

ALL_CATEGORIES_LABEL = "All"
BACK_LABEL = "← Back to results"
SKELETON_CARD_COUNT = 8

PROMPT_MESSAGE = "Please select an Area and/or a Category."
CONTROLS_UNAVAILABLE_MESSAGE = "Failed to load controls. Try reloading the page."


def category_label(value: str) -> str:
    """Select box label for a category value; the empty value means every category."""
    return value or ALL_CATEGORIES_LABEL


def no_results_message(selection: FilterSelection) -> str:
    """Plain text "No results for ..." naming the active filters, e.g. "Italian + Seafood"."""
    return f"No results for {' + '.join(selection.active_values())}."


def card_html(meal: MealSummary) -> str:
    """
    Render one result card.

    The card is focusable (tabindex, role="button") and carries the meal id in
    data-id so the hosting page can wire pointer and keyboard activation to it.
    """
    meal_id = escape_html(meal.id)
    name = escape_html(meal.name)
    return (
        f'<article class="mb-card" data-id="{meal_id}" tabindex="0" role="button" aria-label="{name}">'
        f'<img src="{escape_html(meal.thumbnail_url)}" alt="{name}">'
        f'<div class="mb-card-body"><h3>{name}</h3></div>'
        f"</article>"
    )


def skeleton_cards(count: int = SKELETON_CARD_COUNT) -> str:
    """Grey placeholder cards shown while results are loading."""
    placeholder = (
        '<article class="mb-card mb-card--skeleton" aria-hidden="true">'
        '<div class="mb-skeleton-img"></div>'
        '<div class="mb-card-body"><div class="mb-skeleton-line"></div></div>'
        "</article>"
    )
    return '<div class="mb-grid" aria-busy="true">' + placeholder * count + "</div>"


def render_cards(meals: List[MealSummary]) -> str:
    return '<div class="mb-grid">' + "".join(card_html(meal) for meal in meals) + "</div>"


def render_list(outcome: ListOutcome) -> str:
    """
    Render the results region for a list outcome.

    Args:
        outcome: Any ListOutcome variant

    Returns:
        HTML string for the results region
    """
    if isinstance(outcome, NoSelection):
        return f'<p class="mb-prompt">{escape_html(PROMPT_MESSAGE)}</p>'
    if isinstance(outcome, Loading):
        return skeleton_cards()
    if isinstance(outcome, NoResults):
        return f'<p class="mb-empty">{escape_html(no_results_message(outcome.selection))}</p>'
    if isinstance(outcome, Failed):
        message = f"Failed to load recipes. {outcome.message}".strip()
        return f'<p class="mb-error">{escape_html(message)}</p>'
    if isinstance(outcome, MealList):
        return render_cards(outcome.meals)
    raise TypeError(f"Unsupported list outcome: {outcome!r}")


def meal_detail_html(meal: MealDetail) -> str:
    """Full detail markup: title, area · category, image, ingredients, instructions."""
    name = escape_html(meal.name)
    ingredients = "".join(f"<li>{escape_html(line)}</li>" for line in meal.ingredient_lines)
    return (
        f'<section class="mb-detail" data-id="{escape_html(meal.id)}">'
        f"<h2>{name}</h2>"
        f"<p><strong>{escape_html(meal.area)}</strong> · {escape_html(meal.category)}</p>"
        f'<img src="{escape_html(meal.thumbnail_url)}" alt="{name}" class="mb-detail-img">'
        f"<h3>Ingredients</h3>"
        f"<ul>{ingredients}</ul>"
        f"<h3>Instructions</h3>"
        f"<p>{escape_multiline(meal.instructions)}</p>"
        f"</section>"
    )


def render_detail(outcome: DetailOutcome) -> str:
    """
    Render the detail region for a detail outcome.

    The dismiss action is not part of this markup; the page renders a
    BACK_LABEL button next to it that calls BrowserSession.close_detail().
    """
    if isinstance(outcome, DetailLoading):
        return "<p>Loading…</p>"
    if isinstance(outcome, MealNotFound):
        return '<p class="mb-empty">Not found.</p>'
    if isinstance(outcome, Failed):
        return '<p class="mb-error">Failed to load meal.</p>'
    if isinstance(outcome, MealFound):
        return meal_detail_html(outcome.meal)
    raise TypeError(f"Unsupported detail outcome: {outcome!r}")


def render_controls_unavailable() -> str:
    return f'<p class="mb-error">{escape_html(CONTROLS_UNAVAILABLE_MESSAGE)}</p>'
