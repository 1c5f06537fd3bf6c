import logging
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


def prepare_for_storage(data: Any) -> Any:
    """
    Recursively convert query values to formats a document store driver accepts.

    Handles:
    - Pydantic BaseModel instances (dumped with field aliases)
    - Python dataclasses
    - Enum members (replaced by their value)
    - Dictionaries (processing values recursively)
    - Lists and tuples (processing each item, tuples become lists)
    - Sets and frozensets (become lists, sorted when the items allow it)

    Everything else, including None, is returned unchanged.
    """
    if data is None:
        return None

    if isinstance(data, Enum):
        return prepare_for_storage(data.value)

    if is_dataclass(data) and not isinstance(data, type):
        return prepare_for_storage(asdict(data))

    # Pydantic models
    if hasattr(data, "model_dump") and callable(getattr(data, "model_dump")):
        return prepare_for_storage(data.model_dump(mode="json", by_alias=True))

    if isinstance(data, dict):
        return {k: prepare_for_storage(v) for k, v in data.items()}

    if isinstance(data, (list, tuple)):
        return [prepare_for_storage(item) for item in data]

    if isinstance(data, (set, frozenset)):
        items = [prepare_for_storage(item) for item in data]
        try:
            return sorted(items)
        except TypeError:
            logger.debug("Set items are not orderable; keeping iteration order.")
            return items

    return data
