"""Request body serializers."""

from typing import Any

from opensearchpy.serializer import JSONSerializer


class NdjsonSerializer(JSONSerializer):
    """Newline-delimited JSON, the body format of ``_bulk`` and ``_msearch``.

    Each line is encoded on its own with the regular JSON serializer and the
    body always ends with a newline. A ``str`` line is taken as already
    encoded JSON, the same convention opensearch-py applies to bulk bodies.
    """

    mimetype: str = "application/x-ndjson"

    def dumps(self, data: Any) -> str:
        if isinstance(data, str):
            return data if data.endswith("\n") else data + "\n"
        encoded = []
        for line in data:
            text = super().dumps(line)
            if "\n" in text:
                raise ValueError(f"NDJSON line must not contain a newline: {text!r}")
            encoded.append(text + "\n")
        return "".join(encoded)

    def loads(self, s: str) -> list[Any]:
        return [super().loads(line) for line in s.split("\n") if line.strip()]


def is_lines(body: Any) -> bool:
    """Bodies given as a sequence of lines go out as NDJSON."""
    return isinstance(body, list | tuple)
