from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from content_datasource.config import DatasourceConfig
from content_datasource.domain.filtering import BundleLanguageFilter


def test_allow_all_accepts_everything() -> None:
    f = BundleLanguageFilter.allow_all()
    assert f.is_eligible("article", "en")
    assert f.is_eligible("item", "l1")


def test_explicit_mode_allows_only_listed_values() -> None:
    f = BundleLanguageFilter(bundle_mode="explicit", bundles={"item"})
    assert f.is_eligible("item", "l0")
    assert not f.is_eligible("article", "l0")


def test_default_mode_excludes_listed_values() -> None:
    f = BundleLanguageFilter(language_mode="default", languages={"l0"})
    assert not f.is_eligible("item", "l0")
    assert f.is_eligible("item", "l1")


def test_both_axes_must_pass() -> None:
    f = BundleLanguageFilter(
        bundle_mode="explicit",
        bundles={"item"},
        language_mode="explicit",
        languages={"l1"},
    )
    assert f.is_eligible("item", "l1")
    assert not f.is_eligible("item", "l0")
    assert not f.is_eligible("article", "l1")


def test_explicit_with_empty_set_allows_nothing() -> None:
    f = BundleLanguageFilter(bundle_mode="explicit")
    assert not f.is_eligible("item", "en")


def test_from_config_maps_default_flag_to_mode() -> None:
    cfg = DatasourceConfig.model_validate(
        {
            "bundles": {"default": False, "selected": ["item"]},
            "languages": {"default": True, "selected": ["l0"]},
        }
    )
    f = BundleLanguageFilter.from_config(cfg)
    assert f.bundle_mode == "explicit"
    assert f.bundles == frozenset({"item"})
    assert f.language_mode == "default"
    assert f.languages == frozenset({"l0"})


def test_filter_is_immutable_and_repeatable() -> None:
    f = BundleLanguageFilter(bundle_mode="explicit", bundles=["item"])
    assert isinstance(f.bundles, frozenset)
    assert f.is_eligible("item", "x") == f.is_eligible("item", "x")
    with pytest.raises(FrozenInstanceError):
        f.bundle_mode = "default"  # type: ignore[misc]


def test_eligible_lists_preserve_order() -> None:
    f = BundleLanguageFilter(
        bundle_mode="default", bundles={"page"}, language_mode="explicit", languages={"de", "en"}
    )
    assert f.eligible_bundles(["article", "page", "item"]) == ["article", "item"]
    assert f.eligible_languages(["fr", "en", "de"]) == ["en", "de"]
