"""Extraction of host names from pipeline input.

Callers may pass plain strings or richer records (dicts, dataclasses,
previous ``HostUptimeResult`` values, ``SSHHost`` entries). The first
name-bearing field found is used.
"""

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Mapping
from typing import Any

NAME_FIELDS = (
    "computer_name",
    "computerName",
    "ComputerName",
    "name",
    "hostname",
    "host",
)


def extract_name(item: Any) -> str:
    """Return the host name carried by ``item``.

    Strings are returned stripped, blank ones included. Whether the name
    is usable as a connection target is decided per host, not here.

    Raises:
        ValueError: If a record has no non-blank name-bearing field
    """
    if isinstance(item, str):
        return item.strip()

    for field in NAME_FIELDS:
        if isinstance(item, Mapping):
            value = item.get(field)
        else:
            value = getattr(item, field, None)
        if isinstance(value, str) and value.strip():
            return value.strip()

    raise ValueError(f"Cannot determine a host name from {item!r}")


async def iter_names(
    items: Iterable[Any] | AsyncIterable[Any] | str | None,
) -> AsyncIterator[str]:
    """Yield one host name per input element, from a sync or async source."""
    if items is None:
        return

    if isinstance(items, str):
        items = [items]

    if isinstance(items, AsyncIterable):
        async for item in items:
            yield extract_name(item)
    else:
        for item in items:
            yield extract_name(item)
