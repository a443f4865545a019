from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:  # pragma: no cover
    from ..config import DatasourceConfig, SelectionConfig

# "default": every value except the listed ones; "explicit": only the listed ones
SelectionMode = Literal["default", "explicit"]


def _axis_allows(mode: SelectionMode, selected: frozenset[str], value: str) -> bool:
    if mode == "explicit":
        return value in selected
    return value not in selected


def _mode_of(selection: SelectionConfig) -> SelectionMode:
    return "default" if selection.default else "explicit"


@dataclass(frozen=True)
class BundleLanguageFilter:
    """Decides which bundles and languages may be indexed.

    Immutable; the datasource replaces the whole instance on reconfiguration,
    so concurrent readers never observe a half-applied change.
    """

    bundle_mode: SelectionMode = "default"
    bundles: frozenset[str] = field(default_factory=frozenset)
    language_mode: SelectionMode = "default"
    languages: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Accept any iterable from callers; store frozensets
        object.__setattr__(self, "bundles", frozenset(self.bundles))
        object.__setattr__(self, "languages", frozenset(self.languages))

    @classmethod
    def allow_all(cls) -> BundleLanguageFilter:
        return cls()

    @classmethod
    def from_config(cls, config: DatasourceConfig) -> BundleLanguageFilter:
        return cls(
            bundle_mode=_mode_of(config.bundles),
            bundles=frozenset(config.bundles.selected),
            language_mode=_mode_of(config.languages),
            languages=frozenset(config.languages.selected),
        )

    def is_bundle_eligible(self, bundle: str) -> bool:
        return _axis_allows(self.bundle_mode, self.bundles, bundle)

    def is_language_eligible(self, language_code: str) -> bool:
        return _axis_allows(self.language_mode, self.languages, language_code)

    def is_eligible(self, bundle: str, language_code: str) -> bool:
        return self.is_bundle_eligible(bundle) and self.is_language_eligible(language_code)

    def eligible_bundles(self, known: Iterable[str]) -> list[str]:
        """Narrow ``known`` to the bundles this filter accepts, preserving order."""
        return [b for b in known if self.is_bundle_eligible(b)]

    def eligible_languages(self, known: Iterable[str]) -> list[str]:
        return [code for code in known if self.is_language_eligible(code)]
