"""Parameter-to-query encoding for the News API endpoints.

Each parameter model has one encoder. A field left at its unset value
("", the enum sentinel, [], None or 0) never reaches the query string.
"""

from datetime import datetime, timezone
from enum import Enum
from urllib.parse import urlencode

from headliner.models.options import Category, Country, Language, SearchIn, SortBy
from headliner.models.params import EverythingParameters, SourcesParameters, TopHeadlinesParameters

QueryValues = list[tuple[str, str]]


def format_rfc3339(value: datetime) -> str:
    """Second-precision RFC 3339 timestamp. Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    stamp = value.replace(microsecond=0, tzinfo=None).isoformat()
    offset = int(value.utcoffset().total_seconds())
    if offset == 0:
        return f"{stamp}Z"
    # Offset seconds are truncated: only ±HH:MM is written.
    sign = "-" if offset < 0 else "+"
    hours, minutes = divmod(abs(offset) // 60, 60)
    return f"{stamp}{sign}{hours:02d}:{minutes:02d}"


def _set_string(values: QueryValues, key: str, value: str) -> None:
    if value != "":
        values.append((key, value))


def _set_option(values: QueryValues, key: str, value: Enum, unset: Enum) -> None:
    if value != unset:
        values.append((key, value.value))


def _set_list(values: QueryValues, key: str, items: list[str]) -> None:
    if items:
        values.append((key, ",".join(items)))


def _set_time(values: QueryValues, key: str, value: datetime | None) -> None:
    if value is not None:
        values.append((key, format_rfc3339(value)))


def _set_int(values: QueryValues, key: str, value: int) -> None:
    if value != 0:
        values.append((key, str(value)))


def encode_everything(params: EverythingParameters) -> str:
    values: QueryValues = []
    _set_string(values, "q", params.q)
    _set_option(values, "searchIn", params.search_in, SearchIn.DEFAULT)
    _set_list(values, "sources", params.sources)
    _set_list(values, "domains", params.domains)
    _set_list(values, "excludeDomains", params.exclude_domains)
    _set_time(values, "from", params.from_date)
    _set_time(values, "to", params.to_date)
    _set_option(values, "language", params.language, Language.ALL)
    _set_option(values, "sortBy", params.sort_by, SortBy.DEFAULT)
    _set_int(values, "pageSize", params.page_size)
    _set_int(values, "page", params.page)
    return urlencode(values)


def encode_top_headlines(params: TopHeadlinesParameters) -> str:
    values: QueryValues = []
    _set_option(values, "country", params.country, Country.ALL)
    _set_option(values, "category", params.category, Category.ALL)
    _set_list(values, "sources", params.sources)
    _set_string(values, "q", params.q)
    _set_int(values, "pageSize", params.page_size)
    _set_int(values, "page", params.page)
    return urlencode(values)


def encode_sources(params: SourcesParameters) -> str:
    values: QueryValues = []
    _set_option(values, "category", params.category, Category.ALL)
    _set_option(values, "language", params.language, Language.ALL)
    _set_option(values, "country", params.country, Country.ALL)
    return urlencode(values)


ENCODERS = {
    EverythingParameters: encode_everything,
    TopHeadlinesParameters: encode_top_headlines,
    SourcesParameters: encode_sources,
}


def encode_params(params) -> str:
    """Encode any of the three parameter models into a query string."""
    encoder = ENCODERS.get(type(params))
    if encoder is None:
        raise TypeError(f"Unsupported parameter type: {type(params).__name__}")
    return encoder(params)
