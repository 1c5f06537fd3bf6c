# src/filter_translator/base/config.py
import copy
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .paths import (
    DEFAULT_METADATA_NAMESPACE,
    DEFAULT_RESERVED_FIELDS,
    DEFAULT_VALUE_KEY,
    FieldPathMapper,
)

log = logging.getLogger(__name__)

ENV_RESERVED_FIELDS = "FILTER_TRANSLATOR_RESERVED_FIELDS"
ENV_METADATA_NAMESPACE = "FILTER_TRANSLATOR_METADATA_NAMESPACE"
ENV_VALUE_KEY = "FILTER_TRANSLATOR_VALUE_KEY"


@dataclass
class TranslatorSettings:
    """Storage layout settings used when mapping field names to paths."""

    reserved_fields: Tuple[str, ...] = DEFAULT_RESERVED_FIELDS
    metadata_namespace: str = DEFAULT_METADATA_NAMESPACE
    value_key: str = DEFAULT_VALUE_KEY

    def __post_init__(self):
        self.reserved_fields = tuple(self.reserved_fields)
        if not self.metadata_namespace:
            raise ValueError("metadata_namespace must be a non-empty string")
        if not self.value_key:
            raise ValueError("value_key must be a non-empty string")

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "TranslatorSettings":
        """
        Builds settings from environment variables.

        ``FILTER_TRANSLATOR_RESERVED_FIELDS`` is a comma separated list. Unset
        variables fall back to the defaults; an explicitly empty reserved list
        disables reserved fields.
        """
        env = os.environ if environ is None else environ
        reserved: Tuple[str, ...] = DEFAULT_RESERVED_FIELDS
        raw_reserved = env.get(ENV_RESERVED_FIELDS)
        if raw_reserved is not None:
            reserved = tuple(
                name.strip() for name in raw_reserved.split(",") if name.strip()
            )
        settings = cls(
            reserved_fields=reserved,
            metadata_namespace=env.get(ENV_METADATA_NAMESPACE, DEFAULT_METADATA_NAMESPACE),
            value_key=env.get(ENV_VALUE_KEY, DEFAULT_VALUE_KEY),
        )
        log.debug(f"Loaded translator settings from environment: {settings!r}")
        return settings

    def build_path_mapper(self) -> FieldPathMapper:
        return FieldPathMapper(
            reserved_fields=self.reserved_fields,
            namespace=self.metadata_namespace,
            value_key=self.value_key,
        )

    def __repr__(self) -> str:
        return (
            f"TranslatorSettings(reserved_fields={self.reserved_fields!r}, "
            f"metadata_namespace={self.metadata_namespace!r}, "
            f"value_key={self.value_key!r})"
        )

    def copy(self) -> "TranslatorSettings":
        """Creates a shallow copy of the settings."""
        return copy.copy(self)
