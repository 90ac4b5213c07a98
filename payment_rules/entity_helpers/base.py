"""
Shared plumbing for entity helper classes.

Helpers wrap the raw field bag submitted by a form (or fetched from storage)
and expose each field as a named property. Validators and rules read fields
through these properties rather than indexing the dict directly, so a renamed
or restructured field only has to change in one place.
"""

from typing import Any, List, Tuple


class EntityHelper:
    """Base class for property-based views over a raw entity dict."""

    def __init__(self, data: dict, track_access: bool = False):
        self._data = data if data is not None else {}
        self._track_access = track_access
        self._accesses: dict = {}  # (logical, physical) → None, ordered + deduplicated

    def _record_access(self, logical_name: str, model_path: str = None):
        """Record field access for dependency tracking."""
        if self._track_access:
            self._accesses[(logical_name, model_path or logical_name)] = None

    def _field(self, name: str) -> Any:
        self._record_access(name, name)
        return self._data.get(name)

    def get_accesses(self) -> List[Tuple[str, str]]:
        """Return list of (logical_name, physical_path) pairs, ordered by first access."""
        return list(self._accesses.keys())

    @property
    def raw(self) -> dict:
        """The wrapped dict, untouched."""
        return self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


def as_helper(helper_class, data):
    """Wrap data in helper_class unless it already is one."""
    if isinstance(data, helper_class):
        return data
    return helper_class(data)
