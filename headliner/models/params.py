from datetime import datetime

from pydantic import BaseModel, ConfigDict

from headliner.models.options import Category, Country, Language, SearchIn, SortBy


class _Parameters(BaseModel):
    model_config = ConfigDict(validate_assignment=True)


class EverythingParameters(_Parameters):
    """Query for the /everything endpoint. Fields left at their defaults are not sent."""

    q: str = ""
    search_in: SearchIn = SearchIn.DEFAULT
    sources: list[str] = []
    domains: list[str] = []
    exclude_domains: list[str] = []
    from_date: datetime | None = None
    to_date: datetime | None = None
    language: Language = Language.ALL
    sort_by: SortBy = SortBy.DEFAULT
    page_size: int = 0
    page: int = 0


class TopHeadlinesParameters(_Parameters):
    """Query for the /top-headlines endpoint."""

    country: Country = Country.ALL
    category: Category = Category.ALL
    sources: list[str] = []
    q: str = ""
    page_size: int = 0
    page: int = 0


class SourcesParameters(_Parameters):
    """Query for the /top-headlines/sources endpoint."""

    category: Category = Category.ALL
    language: Language = Language.ALL
    country: Country = Country.ALL
