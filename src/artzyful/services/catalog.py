"""Style prompts and site display text."""

import logging
from dataclasses import dataclass
from typing import Protocol

from artzyful.domain.errors import InvalidRequestError, UnknownStyleError
from artzyful.domain.styles import (
    DEFAULT_PROMPTS,
    DEFAULT_SITE_CONTENT,
    PROMPTS_KEY,
    SITE_CONTENT_KEY,
    STYLE_ORDER,
    is_known_style,
)

logger = logging.getLogger(__name__)


class ConfigStore(Protocol):
    """Key-value store for flat configuration records."""

    def get(self, key: str) -> dict[str, object] | None:
        """Return the stored record, or None when nothing is stored."""

    def put(self, key: str, value: dict[str, object]) -> None:
        """Overwrite the record stored under key."""


@dataclass
class CatalogService:
    """Reads and overwrites style prompts and site content."""

    store: ConfigStore

    def get_prompts(self) -> dict[str, str]:
        """Return prompts for every style, stored values over defaults."""
        stored = self._load(PROMPTS_KEY, DEFAULT_PROMPTS)
        prompts = dict(DEFAULT_PROMPTS)
        prompts.update(
            {key: value for key, value in stored.items() if isinstance(value, str)}
        )
        return prompts

    def get_site_content(self) -> dict[str, object]:
        """Return site display text, stored values over defaults."""
        stored = self._load(SITE_CONTENT_KEY, DEFAULT_SITE_CONTENT)
        return {**DEFAULT_SITE_CONTENT, **stored}

    def update(
        self,
        prompts: dict[str, object] | None = None,
        site_content: dict[str, object] | None = None,
    ) -> None:
        """Overwrite prompts and/or site content wholesale."""
        if prompts is not None:
            self.store.put(PROMPTS_KEY, _validate_prompts(prompts))
            logger.info("Style prompts updated", extra={"styles": sorted(prompts)})
        if site_content is not None:
            self.store.put(SITE_CONTENT_KEY, dict(site_content))
            logger.info("Site content updated")

    def resolve_prompt(self, style: str) -> str:
        """Return the instruction for a style, rejecting unknown styles."""
        if not is_known_style(style):
            raise UnknownStyleError(style)
        return self.get_prompts()[style]

    def display_name(self, style: str) -> str:
        """Return the human-readable name of a style."""
        return _lookup(self.get_site_content().get("styleNames"), style, style)

    def styles(self) -> list[dict[str, str]]:
        """Return the public style listing in canonical order."""
        content = self.get_site_content()
        names = content.get("styleNames")
        descriptions = content.get("styleDescriptions")
        listing = []
        for style in STYLE_ORDER:
            listing.append(
                {
                    "id": style,
                    "name": _lookup(names, style, style),
                    "description": _lookup(descriptions, style, ""),
                }
            )
        return listing

    def _load(
        self, key: str, defaults: dict[str, object] | dict[str, str]
    ) -> dict[str, object]:
        stored = self.store.get(key)
        if stored is None:
            self.store.put(key, dict(defaults))
            return {}
        return stored


def _validate_prompts(prompts: dict[str, object]) -> dict[str, object]:
    cleaned: dict[str, object] = {}
    for style, text in prompts.items():
        if not is_known_style(style):
            raise UnknownStyleError(style)
        if not isinstance(text, str) or not text.strip():
            raise InvalidRequestError(f"Prompt for {style} must be non-empty text")
        cleaned[style] = text.strip()
    return cleaned


def _lookup(mapping: object, key: str, default: str) -> str:
    if isinstance(mapping, dict) and isinstance(mapping.get(key), str):
        return mapping[key]
    return default
