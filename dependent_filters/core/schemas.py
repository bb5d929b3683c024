from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OptionRecord(BaseModel):
    """One selectable choice; extra fields returned by the options resolver are kept."""

    model_config = ConfigDict(extra="allow")

    value: Any
    label: Any = None


class FilterDescriptor(BaseModel):
    """
    What the admin UI renders a filter from.

    Only ``class`` is guaranteed, filters other than ``DependentFilter`` may describe themselves with fewer or
    different fields, which are passed through untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    class_: str = Field(alias="class")
    name: str | None = None
    component: str | None = None
    options: list[Any] = []
    current_value: Any = Field(default="", alias="currentValue")
    dependent_of: list[Any] = Field(default=[], alias="dependentOf")
    hide_when_empty: bool = Field(default=False, alias="hideWhenEmpty")
