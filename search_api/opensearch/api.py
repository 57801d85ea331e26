"""
Interaction with the OpenSearch API by endpoint name.

Every function shapes exactly one HTTP request and hands it to the given
transport client, returning its Result unchanged. See
https://opensearch.org/docs/latest/api-reference for the endpoints.
"""

from search_api.interfaces import ITransportClient
from search_api.opensearch.url import append_query_string, document_path, prepare_url
from search_api.result import Result
from search_api.types import JSON, DocumentId, IndexName, Lines, ServerUrl

UPDATE_BY_QUERY_PARAMS = {"conflicts": "proceed", "wait_for_completion": "false"}


def create_index(
    client: ITransportClient, url: ServerUrl, name: IndexName, mapping: JSON
) -> Result:
    """Create the index named ``name`` with the given settings and mappings.

    https://opensearch.org/docs/latest/api-reference/index-apis/create-index/
    """
    return client.put(prepare_url(url, [name]), mapping)


def delete_index(client: ITransportClient, url: ServerUrl, name: IndexName) -> Result:
    """Delete the index named ``name``.

    https://opensearch.org/docs/latest/api-reference/index-apis/delete-index/
    """
    return client.delete(prepare_url(url, [name]))


def update_index_mapping(
    client: ITransportClient, url: ServerUrl, name: IndexName, properties: JSON
) -> Result:
    """Update the mapping of index ``name`` with ``properties``.

    OpenSearch rejects incompatible field type changes; nothing is checked here.

    https://opensearch.org/docs/latest/api-reference/index-apis/put-mapping/
    """
    return client.put(prepare_url(url, [name, "_mapping"]), properties)


def index_document(
    client: ITransportClient,
    url: ServerUrl,
    name: IndexName,
    document: JSON,
    id: DocumentId,
) -> Result:
    """Create or replace ``document`` with integer id ``id`` in index ``name``.

    https://opensearch.org/docs/latest/api-reference/document-apis/index-document/
    """
    return client.put(prepare_url(url, document_path(name, id)), document)


def delete_document(
    client: ITransportClient, url: ServerUrl, name: IndexName, id: DocumentId
) -> Result:
    """Remove the document with integer id ``id`` from index ``name``.

    https://opensearch.org/docs/latest/api-reference/document-apis/delete-document/
    """
    return client.delete(prepare_url(url, document_path(name, id)))


def bulk(client: ITransportClient, url: ServerUrl, lines: Lines) -> Result:
    """Bulk operation. ``lines`` alternates action metadata and source lines.

    https://opensearch.org/docs/latest/api-reference/document-apis/bulk/
    """
    return client.post(prepare_url(url, ["_bulk"]), lines)


def update_by_query(
    client: ITransportClient, url: ServerUrl, name: IndexName, body: JSON
) -> Result:
    """Asynchronous scripted updates.

    Sets ``conflicts`` to ``proceed`` and ``wait_for_completion`` to ``false``,
    so the response carries a task id instead of the update outcome.

    https://opensearch.org/docs/latest/api-reference/document-apis/update-by-query/
    """
    target = append_query_string(
        prepare_url(url, [name, "_update_by_query"]), UPDATE_BY_QUERY_PARAMS
    )
    return client.post(target, body)


def search(client: ITransportClient, url: ServerUrl, name: IndexName, body: JSON) -> Result:
    """Search for documents in index ``name`` with ``body``.

    https://opensearch.org/docs/latest/api-reference/search/
    """
    return client.get(prepare_url(url, [name, "_search"]), body)


def msearch(client: ITransportClient, url: ServerUrl, lines: Lines) -> Result:
    """Search all indices with header/query ``lines``.

    https://opensearch.org/docs/latest/api-reference/multi-search/
    """
    return client.get(prepare_url(url, ["_msearch"]), lines)
