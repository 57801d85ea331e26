import time
from typing import Any
from urllib.parse import urlsplit

from opensearchpy import Connection, RequestsHttpConnection, exceptions
from opensearchpy.serializer import JSONSerializer

from search_api.interfaces import ITransportClient
from search_api.logging import get_logger
from search_api.opensearch.serializer import NdjsonSerializer, is_lines
from search_api.opensearch.settings import TransportSettings
from search_api.result import Err, HttpError, Ok, Result, TransportFailure
from search_api.types import JSON, HttpVerb

logger = get_logger(__name__)

DEFAULT_PORTS = {"http": 80, "https": 443}

# Statuses the connection must hand back instead of raising on
HTTP_ERROR_STATUSES = tuple(range(300, 600))


class TransportClient(ITransportClient):
    """Executes single HTTP exchanges against OpenSearch.

    A fresh connection is opened for every request and closed afterwards, so
    one client can be shared freely between threads. Retries are disabled:
    every failure is reported to the caller as an ``Err`` result.
    """

    def __init__(
        self,
        *,
        settings: TransportSettings | None = None,
        connection_class: type[Connection] = RequestsHttpConnection,
    ) -> None:
        """Initialize the transport client."""
        self._settings = settings or TransportSettings()
        self._connection_class = connection_class
        self._json = JSONSerializer()
        self._ndjson = NdjsonSerializer()

    @property
    def settings(self) -> TransportSettings:
        return self._settings

    def request(
        self,
        verb: HttpVerb | str,
        url: str,
        body: JSON = None,
        *,
        timeout: float | None = None,
    ) -> Result:
        """
        Perform one HTTP exchange.

        Args:
            verb: HTTP verb, an HttpVerb or its name
            url: Absolute URL including path and query string
            body: Structured body, or a list of lines for NDJSON endpoints
            timeout: Per-call timeout in seconds overriding the configured one

        Returns:
            Ok with the decoded body, or Err describing the failure

        Raises:
            ValueError: If the verb is unknown or the URL is not absolute
            SerializationError: If the body cannot be encoded
        """
        verb = HttpVerb(verb.upper()) if isinstance(verb, str) else verb
        parts = urlsplit(url)
        if parts.scheme not in DEFAULT_PORTS or not parts.hostname:
            raise ValueError(f"Expected an absolute http(s) URL, got {url!r}")

        method = verb.value
        headers = dict(self._settings.headers)
        data = None
        if body is not None:
            serializer = self._ndjson if is_lines(body) else self._json
            data = serializer.dumps(body).encode("utf-8", "surrogatepass")
            headers["content-type"] = serializer.mimetype
            if verb is HttpVerb.GET and self._settings.send_get_body_as == "POST":
                method = HttpVerb.POST.value

        path = parts.path or "/"
        if parts.query:
            path = f"{path}?{parts.query}"

        connection = self._connect(parts.scheme, parts.hostname, parts.port)
        start = time.monotonic()
        try:
            status, _, raw = connection.perform_request(
                method,
                path,
                body=data,
                timeout=timeout or self._settings.timeout,
                headers=headers,
                ignore=HTTP_ERROR_STATUSES,
            )
        except exceptions.ConnectionError as e:
            # Includes ConnectionTimeout and SSLError
            logger.warning(f"{method} {url} failed: {type(e).__name__}: {e.error}")
            return Err(TransportFailure(f"{type(e).__name__}: {e.error}"))
        except exceptions.TransportError as e:
            logger.warning(f"{method} {url} returned HTTP {e.status_code}")
            return Err(HttpError(status=e.status_code, body=self._error_body(e)))
        finally:
            connection.close()

        logger.debug(f"{method} {url} -> {status} ({time.monotonic() - start:.3f}s)")
        if not 200 <= status < 300:
            logger.warning(f"{method} {url} returned HTTP {status}")
            return Err(HttpError(status=status, body=self._decode_error(raw)))
        return self._decode(method, url, raw)

    def _connect(self, scheme: str, host: str, port: int | None) -> Any:
        return self._connection_class(
            host=host,
            port=port or DEFAULT_PORTS[scheme],
            use_ssl=scheme == "https",
            verify_certs=self._settings.verify_certs,
            ssl_show_warn=self._settings.ssl_show_warn,
            http_auth=self._settings.http_auth,
            http_compress=self._settings.http_compress,
            timeout=self._settings.timeout,
        )

    def _decode(self, method: str, url: str, raw: str) -> Result:
        if not raw:
            return Ok(None)
        try:
            return Ok(self._json.loads(raw))
        except exceptions.SerializationError as e:
            logger.warning(f"{method} {url} returned an undecodable body: {e}")
            return Err(TransportFailure(f"Malformed response body: {e}"))

    def _decode_error(self, raw: str) -> JSON:
        """Decoded error document, or the raw text when it is not JSON."""
        if not raw:
            return None
        try:
            return self._json.loads(raw)
        except exceptions.SerializationError:
            return raw

    @staticmethod
    def _error_body(error: exceptions.TransportError) -> JSON:
        """Decoded error document if OpenSearch sent one, else the raw message."""
        if error.info is not None:
            return error.info
        return error.error
