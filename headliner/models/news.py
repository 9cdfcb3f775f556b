from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ArticleSource(_Record):
    id: str | None = None
    name: str | None = None


class Article(_Record):
    source: ArticleSource = ArticleSource()
    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    image_url: str | None = Field(default=None, alias="urlToImage")
    published_at: str | None = Field(default=None, alias="publishedAt")
    content: str | None = None


class Source(_Record):
    """A single news publisher."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    category: str | None = None
    language: str | None = None
    country: str | None = None


class EverythingResponse(_Record):
    status: str
    total_results: int = Field(default=0, alias="totalResults")
    articles: list[Article] = []


class TopHeadlinesResponse(_Record):
    status: str
    total_results: int = Field(default=0, alias="totalResults")
    articles: list[Article] = []


class SourcesResponse(_Record):
    status: str
    sources: list[Source] = []


class ErrorResponse(_Record):
    """Body returned by the API alongside any non-200 status."""

    status: str = ""
    code: str = ""
    message: str = ""

    @field_validator("status", "code", "message", mode="before")
    @classmethod
    def _keep_strings(cls, value):
        # A null or mistyped field is dropped on its own; the rest still decode.
        return value if isinstance(value, str) else ""
