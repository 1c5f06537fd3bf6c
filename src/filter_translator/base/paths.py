# src/filter_translator/base/paths.py
import logging
from typing import FrozenSet, Iterable

log = logging.getLogger(__name__)

# Top-level attributes of a stored record. Everything else lives under the
# metadata namespace.
DEFAULT_RESERVED_FIELDS = ("_id", "uid", "collection", "name")
DEFAULT_METADATA_NAMESPACE = "metadata"
DEFAULT_VALUE_KEY = "value"


class FieldPathMapper:
    """
    Maps filter field names to storage paths.

    Reserved fields are stored as top-level attributes and map to themselves.
    Any other field is a metadata entry stored as
    ``<namespace>.<field>.<value_key>``; presence checks address the entry
    itself (``<namespace>.<field>``) rather than its value.
    """

    def __init__(
        self,
        reserved_fields: Iterable[str] = DEFAULT_RESERVED_FIELDS,
        namespace: str = DEFAULT_METADATA_NAMESPACE,
        value_key: str = DEFAULT_VALUE_KEY,
    ):
        if isinstance(reserved_fields, str):
            raise TypeError("reserved_fields must be an iterable of names, not a string")
        if not namespace:
            raise ValueError("namespace must be a non-empty string")
        if not value_key:
            raise ValueError("value_key must be a non-empty string")
        self._reserved: FrozenSet[str] = frozenset(reserved_fields)
        self._namespace = namespace
        self._value_key = value_key
        log.debug(
            f"FieldPathMapper created: reserved={sorted(self._reserved)}, "
            f"namespace='{namespace}', value_key='{value_key}'"
        )

    @property
    def reserved_fields(self) -> FrozenSet[str]:
        return self._reserved

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def value_key(self) -> str:
        return self._value_key

    def is_reserved(self, field: str) -> bool:
        return field in self._reserved

    def map(self, field: str, presence: bool = False) -> str:
        """Returns the storage path for ``field``."""
        if not isinstance(field, str) or not field:
            raise ValueError(f"Field name must be a non-empty string, got {field!r}")
        if field in self._reserved:
            return field
        entry_path = f"{self._namespace}.{field}"
        return entry_path if presence else f"{entry_path}.{self._value_key}"

    def __repr__(self) -> str:
        return (
            f"FieldPathMapper(reserved_fields={sorted(self._reserved)!r}, "
            f"namespace={self._namespace!r}, value_key={self._value_key!r})"
        )
