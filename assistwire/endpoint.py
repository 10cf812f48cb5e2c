"""Request descriptions shared by the API endpoint builders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlencode

_SIZED = (str, bytes, list, tuple, dict, set, frozenset)


@dataclass(frozen=True)
class ApiRequest:
    """A fully described API call: method, path relative to the base URL and JSON body.

    ``model`` names the model used for deployment routing, ``assistant_beta``
    marks calls that need the assistants beta header, and ``content_type``
    overrides the content type sent with the body.
    """

    method: str
    path: str
    body: dict[str, Any] | None = None
    model: str = ""
    assistant_beta: bool = False
    content_type: str | None = None


@dataclass(frozen=True)
class Pagination:
    """Cursor parameters for list endpoints; unset fields are left out."""

    limit: int | None = None
    order: str | None = None
    after: str | None = None
    before: str | None = None

    def query_string(self) -> str:
        """Return ``?key=value&...`` sorted by key, or an empty string."""
        pairs = [
            ("after", self.after),
            ("before", self.before),
            ("limit", None if self.limit is None else str(int(self.limit))),
            ("order", self.order),
        ]
        present = sorted((key, value) for key, value in pairs if value is not None)
        if not present:
            return ""
        return "?" + urlencode(present)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, _SIZED):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def omit_empty(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Drop entries that are None, False, zero, or an empty string or collection."""
    return {key: value for key, value in mapping.items() if not _is_empty(value)}