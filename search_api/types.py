from enum import Enum

type JSON = None | bool | int | float | str | list[JSON] | dict[str, JSON]

type Lines = list[JSON]

ServerUrl = str
IndexName = str
DocumentId = int


class HttpVerb(Enum):
    """HTTP verbs understood by the transport client."""

    PUT = "PUT"
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
