from __future__ import annotations

from typing import NamedTuple

from ..exceptions import MalformedIdError

SEPARATOR = ":"
# Separates the datasource id from the raw item id in index-wide ids
DATASOURCE_SEPARATOR = "/"


class CompositeItemId(NamedTuple):
    """Entity id plus translation language, written as ``<entityId>:<languageCode>``."""

    entity_id: str
    language_code: str

    def __str__(self) -> str:
        return f"{self.entity_id}{SEPARATOR}{self.language_code}"

    @classmethod
    def parse(cls, text: str) -> CompositeItemId:
        return decode(text)


def encode(entity_id: str, language_code: str) -> str:
    entity_id = str(entity_id)
    language_code = str(language_code)
    if not entity_id or not language_code:
        raise MalformedIdError(f"{entity_id}{SEPARATOR}{language_code}", "empty component")
    if SEPARATOR in entity_id or SEPARATOR in language_code:
        raise MalformedIdError(
            f"{entity_id}{SEPARATOR}{language_code}", f"component contains {SEPARATOR!r}"
        )
    return f"{entity_id}{SEPARATOR}{language_code}"


def decode(composite_id: str) -> CompositeItemId:
    """Split on the first separator.

    Raises MalformedIdError when the separator is absent.
    """
    entity_id, sep, language_code = str(composite_id).partition(SEPARATOR)
    if not sep:
        raise MalformedIdError(composite_id)
    return CompositeItemId(entity_id, language_code)


def combine_id(datasource_id: str, raw_id: str) -> str:
    return f"{datasource_id}{DATASOURCE_SEPARATOR}{raw_id}"


def split_combined_id(combined_id: str) -> tuple[str, str]:
    datasource_id, sep, raw_id = str(combined_id).partition(DATASOURCE_SEPARATOR)
    if not sep:
        raise MalformedIdError(combined_id, f"missing datasource separator {DATASOURCE_SEPARATOR!r}")
    return datasource_id, raw_id
