"""
Meal, selection and outcome models for the meal browser.

This module defines the canonical schemas used throughout the browser. The
connector maps TheMealDB's raw rows into MealSummary / MealDetail at the
boundary, so nothing past the connector ever sees provider field names like
idMeal or strIngredient7.

# NOTE: Outcomes are tagged variants. Each one carries a literal ``kind`` so the
    presenter (and the Streamlit client, after a JSON round trip through the
    API) can switch on the variant instead of inspecting list lengths or
    catching exceptions:

    ListOutcome   = NoSelection | Loading | NoResults | MealList | Failed
    DetailOutcome = DetailLoading | MealFound | MealNotFound | Failed
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from mealbrowser.utils.text import collapse_whitespace

# TheMealDB stores ingredients in flat slots strIngredient1..20 / strMeasure1..20
INGREDIENT_SLOTS = 20


class FilterSelection(BaseModel):
    """
    The user's current filter choice: one cuisine area and one category.

    An empty string means the dimension is inactive. Both empty is a valid
    selection meaning "nothing chosen yet".
    """
    area: str = Field("", description="Selected cuisine area, empty when inactive")
    category: str = Field("", description="Selected meal category, empty when inactive")

    model_config = ConfigDict(frozen=True)

    @field_validator("area", "category", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> str:
        return "" if value is None else value

    @property
    def is_empty(self) -> bool:
        return not self.area and not self.category

    def active_values(self) -> List[str]:
        """Active filter values in area, category order."""
        return [value for value in (self.area, self.category) if value]


class MealSummary(BaseModel):
    """A meal as returned by the filter endpoints: id, name and thumbnail."""
    id: str = Field(..., description="Provider meal identifier, always a string")
    name: str = Field("", description="Meal name")
    thumbnail_url: str = Field("", description="URL of the meal thumbnail image")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> str:
        # The provider is not consistent about numeric vs string ids; null means no id
        return "" if value is None else str(value)

    @field_validator("name", "thumbnail_url", mode="before")
    @classmethod
    def _none_is_blank(cls, value: Any) -> str:
        return "" if value is None else value

    @classmethod
    def from_provider(cls, row: Dict[str, Any]) -> "MealSummary":
        return cls(
            id=row.get("idMeal", ""),
            name=row.get("strMeal"),
            thumbnail_url=row.get("strMealThumb"),
        )


class Ingredient(BaseModel):
    """One ingredient slot of a meal: optional measure plus ingredient name."""
    measure: Optional[str] = Field(None, description="Amount, e.g. '1 cup'")
    name: str = Field(..., description="Ingredient name")

    @property
    def line(self) -> str:
        """Measure and name joined by one space, whitespace collapsed."""
        parts = [part for part in (self.measure, self.name) if part]
        return collapse_whitespace(" ".join(parts))


def extract_ingredients(meal: Dict[str, Any]) -> List[Ingredient]:
    """
    Read the provider's numbered ingredient slots into an ordered list.

    A slot is kept only when its ingredient name is non-empty after trimming.
    Empty slots in the middle are skipped, not treated as the end of the list.

    Examples:
        >>> raw = {"strMeasure1": "1 cup", "strIngredient1": "Sugar",
        ...        "strMeasure2": "", "strIngredient2": "Flour",
        ...        "strIngredient3": ""}
        >>> [i.line for i in extract_ingredients(raw)]
        ['1 cup Sugar', 'Flour']
    """
    ingredients: List[Ingredient] = []
    for slot in range(1, INGREDIENT_SLOTS + 1):
        name = meal.get(f"strIngredient{slot}")
        if not name or not str(name).strip():
            continue
        measure = meal.get(f"strMeasure{slot}")
        ingredients.append(Ingredient(measure=measure or None, name=str(name)))
    return ingredients


class MealDetail(BaseModel):
    """Full meal record from the lookup endpoint, normalized."""
    id: str = Field(..., description="Provider meal identifier")
    name: str = Field("", description="Meal name")
    area: str = Field("", description="Cuisine area")
    category: str = Field("", description="Meal category")
    thumbnail_url: str = Field("", description="URL of the meal image")
    instructions: str = Field("", description="Free text cooking instructions")
    ingredients: List[Ingredient] = Field(default_factory=list, description="Ingredients in slot order")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "52772",
                "name": "Teriyaki Chicken Casserole",
                "area": "Japanese",
                "category": "Chicken",
                "thumbnail_url": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
                "instructions": "Preheat oven to 350° F.\nSpray a 9x13-inch baking pan.",
                "ingredients": [{"measure": "3/4 cup", "name": "soy sauce"}],
            }
        }
    )

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("name", "area", "category", "thumbnail_url", "instructions", mode="before")
    @classmethod
    def _none_is_blank(cls, value: Any) -> str:
        return "" if value is None else value

    @property
    def ingredient_lines(self) -> List[str]:
        return [ingredient.line for ingredient in self.ingredients]

    @classmethod
    def from_provider(cls, meal: Dict[str, Any]) -> "MealDetail":
        return cls(
            id=meal.get("idMeal", ""),
            name=meal.get("strMeal"),
            area=meal.get("strArea"),
            category=meal.get("strCategory"),
            thumbnail_url=meal.get("strMealThumb"),
            instructions=meal.get("strInstructions"),
            ingredients=extract_ingredients(meal),
        )


class Controls(BaseModel):
    """Available filter values. categories[0] is the synthetic "All" entry ("")."""
    areas: List[str] = Field(default_factory=list, description="Cuisine areas, sorted")
    categories: List[str] = Field(default_factory=list, description="'' (All) followed by sorted categories")


# List outcomes

class NoSelection(BaseModel):
    """Neither filter is active; the user should be prompted to pick one."""
    kind: Literal["no_selection"] = "no_selection"


class Loading(BaseModel):
    """A request for this view is in flight."""
    kind: Literal["loading"] = "loading"


class NoResults(BaseModel):
    """The selection was valid but matched no meals."""
    kind: Literal["no_results"] = "no_results"
    selection: FilterSelection


class MealList(BaseModel):
    """Meals matching the selection, in provider (area list) order."""
    kind: Literal["results"] = "results"
    selection: FilterSelection
    meals: List[MealSummary] = Field(default_factory=list)


class Failed(BaseModel):
    """The request behind this view failed; message is safe to show."""
    kind: Literal["error"] = "error"
    message: str = ""


# Detail outcomes

class DetailLoading(BaseModel):
    kind: Literal["loading"] = "loading"


class MealFound(BaseModel):
    kind: Literal["detail"] = "detail"
    meal: MealDetail


class MealNotFound(BaseModel):
    kind: Literal["not_found"] = "not_found"
    meal_id: str = ""


ListOutcome = Annotated[
    Union[NoSelection, Loading, NoResults, MealList, Failed],
    Field(discriminator="kind"),
]

DetailOutcome = Annotated[
    Union[DetailLoading, MealFound, MealNotFound, Failed],
    Field(discriminator="kind"),
]

list_outcome_adapter: TypeAdapter = TypeAdapter(ListOutcome)
detail_outcome_adapter: TypeAdapter = TypeAdapter(DetailOutcome)
