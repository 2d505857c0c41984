"""
Tests for list and detail markup.

Checks that every outcome variant renders its message and that provider text
is always escaped before it reaches the page.
"""

import pytest

from mealbrowser.models import (
    DetailLoading,
    Failed,
    FilterSelection,
    Ingredient,
    Loading,
    MealDetail,
    MealFound,
    MealList,
    MealNotFound,
    MealSummary,
    NoResults,
    NoSelection,
)
from mealbrowser.presenter import (
    PROMPT_MESSAGE,
    SKELETON_CARD_COUNT,
    card_html,
    category_label,
    no_results_message,
    render_controls_unavailable,
    render_detail,
    render_list,
)
from mealbrowser.utils.text import escape_html, escape_multiline
from conftest import meals


class TestEscaping:
    """Test cases for the text helpers."""

    def test_escape_html_special_characters(self):
        assert escape_html("<a href=\"x\">Tom & Jerry's</a>") == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#x27;s&lt;/a&gt;"
        )

    def test_escape_html_none_and_numbers(self):
        assert escape_html(None) == ""
        assert escape_html(52772) == "52772"

    def test_escape_multiline_converts_line_breaks(self):
        assert escape_multiline("  Step 1\r\nStep 2\rStep <3>\n") == "Step 1<br>Step 2<br>Step &lt;3&gt;"


class TestCardHtml:
    """Test cases for result cards."""

    def test_hostile_name_is_escaped(self):
        meal = MealSummary(id="1", name="O'Brien's <Stew>", thumbnail_url="https://x/1.jpg")

        markup = card_html(meal)

        assert "O'Brien" not in markup
        assert "<Stew>" not in markup
        assert "O&#x27;Brien&#x27;s &lt;Stew&gt;" in markup

    def test_attribute_values_are_escaped(self):
        meal = MealSummary(id='1" onclick="x', name="Soup", thumbnail_url='https://x/"><script>')

        markup = card_html(meal)

        assert 'onclick="x"' not in markup
        assert "<script>" not in markup
        assert 'data-id="1&quot; onclick=&quot;x"' in markup

    def test_card_is_keyboard_focusable_and_keyed(self):
        markup = card_html(MealSummary(id="52772", name="Casserole", thumbnail_url="https://x/1.jpg"))

        assert 'data-id="52772"' in markup
        assert 'tabindex="0"' in markup
        assert 'role="button"' in markup
        assert 'alt="Casserole"' in markup


class TestRenderList:
    """Test cases for the list region."""

    def test_no_selection_prompts(self):
        assert PROMPT_MESSAGE in render_list(NoSelection())

    def test_loading_shows_skeletons(self):
        markup = render_list(Loading())
        assert markup.count("mb-card--skeleton") == SKELETON_CARD_COUNT

    def test_no_results_names_both_filters(self):
        markup = render_list(NoResults(selection=FilterSelection(area="Italian", category="Dessert")))
        assert "No results for Italian + Dessert." in markup

    def test_no_results_names_single_filter(self):
        assert no_results_message(FilterSelection(category="Seafood")) == "No results for Seafood."

    def test_no_results_escapes_filter_values(self):
        markup = render_list(NoResults(selection=FilterSelection(area="<b>")))
        assert "<b>" not in markup
        assert "&lt;b&gt;" in markup

    def test_error_includes_failure_text(self):
        markup = render_list(Failed(message="HTTP 500 for https://x/filter.php"))
        assert "Failed to load recipes. HTTP 500 for https://x/filter.php" in markup
        assert 'class="mb-error"' in markup

    def test_results_render_one_card_per_meal_in_order(self):
        markup = render_list(MealList(selection=FilterSelection(area="Italian"), meals=meals(5, 3, 9)))

        assert markup.count('class="mb-card"') == 3
        assert markup.index('data-id="5"') < markup.index('data-id="3"') < markup.index('data-id="9"')

    def test_unknown_outcome_is_rejected(self):
        with pytest.raises(TypeError):
            render_list(object())


class TestRenderDetail:
    """Test cases for the detail region."""

    @pytest.fixture
    def meal(self):
        return MealDetail(
            id="52772",
            name="Teriyaki Chicken Casserole",
            area="Japanese",
            category="Chicken",
            thumbnail_url="https://x/1.jpg",
            instructions="Preheat oven.\r\nMix <everything>.",
            ingredients=[
                Ingredient(measure="3/4 cup", name="soy sauce"),
                Ingredient(measure=None, name="Salt & pepper"),
            ],
        )

    def test_detail_sections(self, meal):
        markup = render_detail(MealFound(meal=meal))

        assert "<h2>Teriyaki Chicken Casserole</h2>" in markup
        assert "<strong>Japanese</strong> · Chicken" in markup
        assert "<li>3/4 cup soy sauce</li>" in markup
        assert "<li>Salt &amp; pepper</li>" in markup
        assert "Preheat oven.<br>Mix &lt;everything&gt;." in markup
        assert 'class="mb-detail-img"' in markup

    def test_loading(self):
        assert "Loading…" in render_detail(DetailLoading())

    def test_not_found(self):
        assert "Not found." in render_detail(MealNotFound(meal_id="0"))

    def test_failed(self):
        assert "Failed to load meal." in render_detail(Failed(message="HTTP 502"))


class TestLabels:
    def test_category_label(self):
        assert category_label("") == "All"
        assert category_label("Seafood") == "Seafood"

    def test_controls_unavailable(self):
        assert "Failed to load controls." in render_controls_unavailable()
