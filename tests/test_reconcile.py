"""
Tests for filter reconciliation.

These tests verify that:
- An empty selection never queries and yields NoSelection
- A single active filter issues exactly one query and keeps provider order
- Two active filters are fetched concurrently and intersected by string id
- Any failed query fails the whole resolution
All catalog access goes through a mocked connector.
"""

import threading

import pytest

from mealbrowser.errors import QueryError
from mealbrowser.models import FilterSelection, MealList, MealSummary, NoResults, NoSelection
from mealbrowser.reconcile import intersect_meals_by_id, resolve
from conftest import meals


class TestIntersectMealsById:
    """Test cases for the id intersection helper."""

    def test_preserves_area_order(self):
        """area=[1,2,3], category=[3,1] -> [1,3]."""
        result = intersect_meals_by_id(meals(1, 2, 3), meals(3, 1))
        assert [m.id for m in result] == ["1", "3"]

    def test_string_and_numeric_ids_match(self):
        area = [MealSummary(id="52772", name="Teriyaki Chicken Casserole")]
        category = [MealSummary.from_provider({"idMeal": 52772, "strMeal": "Teriyaki Chicken Casserole"})]
        result = intersect_meals_by_id(area, category)
        assert len(result) == 1
        assert result[0].id == "52772"

    def test_disjoint_lists_give_empty_result(self):
        assert intersect_meals_by_id(meals(1, 2), meals(3, 4)) == []

    def test_empty_inputs(self):
        assert intersect_meals_by_id([], meals(1)) == []
        assert intersect_meals_by_id(meals(1), []) == []

    def test_blank_ids_never_match(self):
        area = [MealSummary(id=None, name="Ghost"), MealSummary(id="1")]
        category = [MealSummary(id=None, name="Other ghost"), MealSummary(id="1")]
        assert [m.id for m in intersect_meals_by_id(area, category)] == ["1"]

    def test_keeps_area_records(self):
        """The returned objects are the area list's records, not the category's."""
        area = [MealSummary(id="7", name="From area")]
        category = [MealSummary(id="7", name="From category")]
        assert intersect_meals_by_id(area, category)[0].name == "From area"


class TestResolve:
    """Test cases for resolve()."""

    def test_empty_selection_is_no_selection(self, connector):
        outcome = resolve(FilterSelection(), connector)

        assert isinstance(outcome, NoSelection)
        connector.meals_by_area.assert_not_called()
        connector.meals_by_category.assert_not_called()

    def test_none_values_count_as_empty(self, connector):
        outcome = resolve(FilterSelection(area=None, category=None), connector)
        assert isinstance(outcome, NoSelection)

    def test_area_only_issues_one_query(self, connector):
        connector.meals_by_area.return_value = meals(5, 3, 9)

        outcome = resolve(FilterSelection(area="Italian"), connector)

        assert isinstance(outcome, MealList)
        assert [m.id for m in outcome.meals] == ["5", "3", "9"]
        connector.meals_by_area.assert_called_once_with("Italian")
        connector.meals_by_category.assert_not_called()

    def test_category_only_issues_one_query(self, connector):
        connector.meals_by_category.return_value = meals(1, 2)

        outcome = resolve(FilterSelection(category="Seafood"), connector)

        assert isinstance(outcome, MealList)
        assert outcome.selection.category == "Seafood"
        connector.meals_by_category.assert_called_once_with("Seafood")
        connector.meals_by_area.assert_not_called()

    def test_single_filter_without_meals_is_no_results(self, connector):
        connector.meals_by_area.return_value = []

        outcome = resolve(FilterSelection(area="Atlantis"), connector)

        assert isinstance(outcome, NoResults)
        assert outcome.selection.area == "Atlantis"

    def test_both_filters_are_intersected(self, connector):
        connector.meals_by_area.return_value = meals(1, 2, 3)
        connector.meals_by_category.return_value = meals(3, 1)

        outcome = resolve(FilterSelection(area="Italian", category="Seafood"), connector)

        assert isinstance(outcome, MealList)
        assert [m.id for m in outcome.meals] == ["1", "3"]
        connector.meals_by_area.assert_called_once_with("Italian")
        connector.meals_by_category.assert_called_once_with("Seafood")

    def test_disjoint_filters_are_no_results_not_error(self, connector):
        connector.meals_by_area.return_value = meals(1, 2)
        connector.meals_by_category.return_value = meals(8, 9)

        outcome = resolve(FilterSelection(area="Italian", category="Dessert"), connector)

        assert isinstance(outcome, NoResults)

    def test_both_queries_are_in_flight_together(self, connector):
        """Each query waits for the other to start; sequential calls would break the barrier."""
        barrier = threading.Barrier(2, timeout=5)

        def by_area(area):
            barrier.wait()
            return meals(1, 2)

        def by_category(category):
            barrier.wait()
            return meals(2)

        connector.meals_by_area.side_effect = by_area
        connector.meals_by_category.side_effect = by_category

        outcome = resolve(FilterSelection(area="Italian", category="Pasta"), connector)

        assert [m.id for m in outcome.meals] == ["2"]

    def test_area_failure_fails_resolution(self, connector):
        connector.meals_by_area.side_effect = QueryError("HTTP 500 for filter.php")
        connector.meals_by_category.return_value = meals(1)

        with pytest.raises(QueryError, match="HTTP 500"):
            resolve(FilterSelection(area="Italian", category="Seafood"), connector)

    def test_category_failure_fails_resolution(self, connector):
        connector.meals_by_area.return_value = meals(1)
        connector.meals_by_category.side_effect = QueryError("Request timed out")

        with pytest.raises(QueryError, match="timed out"):
            resolve(FilterSelection(area="Italian", category="Seafood"), connector)

    def test_both_failing_reports_area_error(self, connector):
        connector.meals_by_area.side_effect = QueryError("area down")
        connector.meals_by_category.side_effect = QueryError("category down")

        with pytest.raises(QueryError, match="area down"):
            resolve(FilterSelection(area="Italian", category="Seafood"), connector)

    def test_single_filter_failure_propagates(self, connector):
        connector.meals_by_category.side_effect = QueryError("boom")

        with pytest.raises(QueryError):
            resolve(FilterSelection(category="Seafood"), connector)
