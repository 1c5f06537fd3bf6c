# src/filter_translator/mongodb/serializer.py
import logging
from typing import Any, Dict, Optional

from filter_translator.base.filter import Filter
from filter_translator.base.translator import QueryTranslator
from filter_translator.mongodb.encoder import MongoQueryEncoder

base_logger = logging.getLogger(__name__)


class MongoFilterSerializer:
    """
    Translates a :class:`Filter` straight into a MongoDB query document, so a
    dataset can be filtered before a persistence-layer function is applied.
    A missing filter serializes to ``{}``.
    """

    def __init__(
        self,
        translator: Optional[QueryTranslator] = None,
        encoder: Optional[MongoQueryEncoder] = None,
    ):
        self._translator = translator or QueryTranslator()
        self._encoder = encoder or MongoQueryEncoder()

    @property
    def translator(self) -> QueryTranslator:
        return self._translator

    def serialize(self, filter: Optional[Filter]) -> Dict[str, Any]:
        expression = self._translator.translate(filter)
        document = self._encoder.encode(expression)
        base_logger.debug(f"Serialized filter {filter!r} to {document}")
        return document

    def map_field_to_property(self, field: str, presence: bool = False) -> str:
        """Returns the storage path for ``field`` (see :class:`FieldPathMapper`)."""
        return self._translator.map_field(field, presence=presence)

    def match_stage(self, filter: Optional[Filter]) -> Dict[str, Any]:
        """Wraps the serialized filter in a ``$match`` aggregation stage."""
        return {"$match": self.serialize(filter)}
