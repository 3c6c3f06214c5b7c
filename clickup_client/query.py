"""Query string construction for ClickUp endpoints."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from urllib.parse import quote


class ListStyle(StrEnum):
    """How a list-valued option is rendered in the query string."""

    REPEATED = "repeated"  # name[]=a&name[]=b
    COMMA = "comma"  # name=a,b


def _encode(value: str) -> str:
    return quote(value, safe="")


class QueryParams:
    """Ordered accumulator of query string parameters.

    Omitted (None) values are never rendered. Booleans render as lowercase
    ``true``/``false``. Keys and values are percent-encoded on render; the
    separator of a comma-joined list stays a literal comma.
    """

    def __init__(self) -> None:
        """Initialise an empty parameter list."""
        # Each entry is (name, parts); parts has one element unless comma-joined
        self._entries: list[tuple[str, list[str]]] = []

    def add(self, name: str, value: str | int | None) -> QueryParams:
        """Add a scalar parameter.

        :param name: Parameter name.
        :param value: Parameter value; skipped when None.
        :returns: This instance for chaining.
        """
        if value is not None:
            self._entries.append((name, [str(value)]))
        return self

    def add_bool(self, name: str, value: bool | None) -> QueryParams:
        """Add a boolean parameter rendered as ``true``/``false``.

        :param name: Parameter name.
        :param value: Parameter value; skipped when None.
        :returns: This instance for chaining.
        """
        if value is not None:
            self._entries.append((name, ["true" if value else "false"]))
        return self

    def add_list(
        self,
        name: str,
        values: Iterable[str | int] | None,
        style: ListStyle = ListStyle.REPEATED,
    ) -> QueryParams:
        """Add a list-valued parameter.

        :param name: Parameter name, without the ``[]`` suffix.
        :param values: Values to render; skipped when None or empty.
        :param style: Repeated ``name[]=value`` pairs or one comma-joined value.
        :returns: This instance for chaining.
        """
        if values is None:
            return self
        items = [str(v) for v in values]
        if not items:
            return self

        if style == ListStyle.REPEATED:
            self._entries.extend((f"{name}[]", [item]) for item in items)
        else:
            self._entries.append((name, items))
        return self

    def extend(self, other: QueryParams) -> QueryParams:
        """Append every entry of another instance.

        :param other: Parameters to append.
        :returns: This instance for chaining.
        """
        self._entries.extend((name, list(parts)) for name, parts in other._entries)
        return self

    @property
    def pairs(self) -> list[tuple[str, str]]:
        """Un-encoded (name, value) pairs in insertion order."""
        return [(name, ",".join(parts)) for name, parts in self._entries]

    def render(self) -> str:
        """Render the query string including the leading ``?``.

        :returns: Encoded query string, or an empty string if there are no parameters.
        """
        if not self._entries:
            return ""

        rendered = [
            f"{_encode(name)}={','.join(_encode(part) for part in parts)}"
            for name, parts in self._entries
        ]
        return "?" + "&".join(rendered)

    def __len__(self) -> int:
        return len(self._entries)


def build_path(path: str, params: QueryParams | None = None) -> str:
    """Append a rendered query string to an endpoint path.

    :param path: Endpoint path relative to the API base URL.
    :param params: Query parameters, if any.
    :returns: Path with query string.
    """
    if params is None:
        return path
    return f"{path}{params.render()}"
