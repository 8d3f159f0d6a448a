from enum import Enum

from pydantic import BaseModel

from models.country import CountrySummary


class SearchField(str, Enum):
    NAME = "name"
    CODE = "code"
    CONTINENT = "continent"
    CAPITAL = "capital"


class FilterQuery(BaseModel):
    text: str = ""
    # Kept as a plain string: values outside SearchField are valid input and match nothing.
    field: str = SearchField.NAME.value

    @property
    def normalized_text(self) -> str:
        return self.text.strip().lower()


class FilterResult(BaseModel):
    countries: list[CountrySummary]
    status: str
