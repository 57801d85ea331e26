"""Type definitions and interfaces for the OpenSearch API client."""

from abc import ABC, abstractmethod

from search_api.result import Result
from search_api.types import JSON, HttpVerb


class ITransportClient(ABC):
    """Transport client interface.

    Implementations perform exactly one HTTP exchange per call and report
    the outcome as a Result instead of raising.
    """

    @abstractmethod
    def request(
        self,
        verb: HttpVerb,
        url: str,
        body: JSON = None,
        *,
        timeout: float | None = None,
    ) -> Result:
        """Send ``body`` to ``url`` with ``verb``."""

    def put(self, url: str, body: JSON, *, timeout: float | None = None) -> Result:
        return self.request(HttpVerb.PUT, url, body, timeout=timeout)

    def get(self, url: str, body: JSON = None, *, timeout: float | None = None) -> Result:
        return self.request(HttpVerb.GET, url, body, timeout=timeout)

    def post(self, url: str, body: JSON, *, timeout: float | None = None) -> Result:
        return self.request(HttpVerb.POST, url, body, timeout=timeout)

    def delete(self, url: str, *, timeout: float | None = None) -> Result:
        return self.request(HttpVerb.DELETE, url, timeout=timeout)
