"""Tests for the style catalog."""

import pytest

from artzyful.domain.errors import InvalidRequestError, UnknownStyleError
from artzyful.domain.styles import (
    DEFAULT_PROMPTS,
    DEFAULT_SITE_CONTENT,
    PROMPTS_KEY,
    SITE_CONTENT_KEY,
    STYLE_ORDER,
)
from artzyful.services.catalog import CatalogService
from tests.conftest import InMemoryConfigStore


def test_get_prompts_seeds_defaults_when_store_is_empty(
    catalog_service: CatalogService, config_store: InMemoryConfigStore
) -> None:
    prompts = catalog_service.get_prompts()

    assert prompts == DEFAULT_PROMPTS
    assert config_store.records[PROMPTS_KEY] == DEFAULT_PROMPTS


def test_stored_prompts_override_defaults(
    catalog_service: CatalogService, config_store: InMemoryConfigStore
) -> None:
    config_store.records[PROMPTS_KEY] = {"get-naked": "Paint it blue."}

    prompts = catalog_service.get_prompts()

    assert prompts["get-naked"] == "Paint it blue."
    assert prompts["purr-my-bubbles"] == DEFAULT_PROMPTS["purr-my-bubbles"]


def test_site_content_merges_over_defaults(
    catalog_service: CatalogService, config_store: InMemoryConfigStore
) -> None:
    config_store.records[SITE_CONTENT_KEY] = {"heroTitle": "Pets, but fancy"}

    content = catalog_service.get_site_content()

    assert content["heroTitle"] == "Pets, but fancy"
    assert content["styleNames"] == DEFAULT_SITE_CONTENT["styleNames"]


def test_update_overwrites_records_wholesale(
    catalog_service: CatalogService, config_store: InMemoryConfigStore
) -> None:
    config_store.records[PROMPTS_KEY] = dict(DEFAULT_PROMPTS)

    catalog_service.update(
        prompts={"fluff-and-fabulous": "  Add a tiara.  "},
        site_content={"heroTitle": "New"},
    )

    assert config_store.records[PROMPTS_KEY] == {"fluff-and-fabulous": "Add a tiara."}
    assert config_store.records[SITE_CONTENT_KEY] == {"heroTitle": "New"}
    assert catalog_service.resolve_prompt("fluff-and-fabulous") == "Add a tiara."


def test_update_rejects_unknown_style(
    catalog_service: CatalogService, config_store: InMemoryConfigStore
) -> None:
    with pytest.raises(UnknownStyleError):
        catalog_service.update(prompts={"dog-in-space": "Rocket."})

    assert PROMPTS_KEY not in config_store.writes


def test_update_rejects_blank_prompt(catalog_service: CatalogService) -> None:
    with pytest.raises(InvalidRequestError, match="non-empty"):
        catalog_service.update(prompts={"get-naked": "   "})


def test_resolve_prompt_rejects_unknown_style(
    catalog_service: CatalogService, config_store: InMemoryConfigStore
) -> None:
    with pytest.raises(UnknownStyleError) as excinfo:
        catalog_service.resolve_prompt("dog-in-space")

    assert excinfo.value.status_code == 400
    assert config_store.writes == []


def test_display_name_falls_back_to_identifier(
    catalog_service: CatalogService, config_store: InMemoryConfigStore
) -> None:
    config_store.records[SITE_CONTENT_KEY] = {"styleNames": {"get-naked": "Spa Day"}}

    assert catalog_service.display_name("get-naked") == "Spa Day"
    assert catalog_service.display_name("purr-my-bubbles") == "purr-my-bubbles"


def test_styles_follow_canonical_order(catalog_service: CatalogService) -> None:
    styles = catalog_service.styles()

    assert [style["id"] for style in styles] == list(STYLE_ORDER)
    assert styles[1]["name"] == "Fluff & Fabulous"
    assert styles[2]["description"] == "Bubble bath fun with rubber duck"
