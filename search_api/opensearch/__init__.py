"""
OpenSearch endpoint functions and transport.

The endpoint functions in ``api`` shape requests; ``TransportClient``
executes them and reports the outcome as a Result.
"""

from search_api.opensearch.api import (
    bulk,
    create_index,
    delete_document,
    delete_index,
    index_document,
    msearch,
    search,
    update_by_query,
    update_index_mapping,
)
from search_api.opensearch.client import TransportClient
from search_api.opensearch.settings import TransportSettings
from search_api.result import (
    Err,
    HttpError,
    Ok,
    Result,
    SearchRequestError,
    TransportFailure,
)
from search_api.types import JSON, HttpVerb

__all__ = [
    "JSON",
    "Err",
    "HttpError",
    "HttpVerb",
    "Ok",
    "Result",
    "SearchRequestError",
    "TransportClient",
    "TransportFailure",
    "TransportSettings",
    "bulk",
    "create_index",
    "delete_document",
    "delete_index",
    "index_document",
    "msearch",
    "search",
    "update_by_query",
    "update_index_mapping",
]
