from headliner.client import EVERYTHING_ENDPOINT, SOURCES_ENDPOINT, TOP_HEADLINES_ENDPOINT, request
from headliner.exceptions import NewsAPIError
from headliner.models.news import EverythingResponse, SourcesResponse, TopHeadlinesResponse
from headliner.models.params import EverythingParameters, SourcesParameters, TopHeadlinesParameters


def get_everything(api_key: str, params: EverythingParameters | None = None, **options) -> EverythingResponse:
    """Search every indexed article. Options: base_url, timeout, session."""
    if params is None:
        params = EverythingParameters()
    try:
        return request(api_key, EVERYTHING_ENDPOINT, params, EverythingResponse, **options)
    except NewsAPIError as e:
        e.operation = "headliner.get_everything"
        raise


def get_top_headlines(
    api_key: str, params: TopHeadlinesParameters | None = None, **options
) -> TopHeadlinesResponse:
    """Breaking headlines by country, category or source."""
    if params is None:
        params = TopHeadlinesParameters()
    try:
        return request(api_key, TOP_HEADLINES_ENDPOINT, params, TopHeadlinesResponse, **options)
    except NewsAPIError as e:
        e.operation = "headliner.get_top_headlines"
        raise


def get_sources(api_key: str, params: SourcesParameters | None = None, **options) -> SourcesResponse:
    if params is None:
        params = SourcesParameters()
    try:
        return request(api_key, SOURCES_ENDPOINT, params, SourcesResponse, **options)
    except NewsAPIError as e:
        e.operation = "headliner.get_sources"
        raise
