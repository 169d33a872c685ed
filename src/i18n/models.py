"""
src/i18n/models.py
──────────────────
Pydantic v2 models for languages, head metadata and change notifications.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, model_validator

from config.languages import LANGUAGE_NAMES


class LanguageCode(str, Enum):
    EN = "en"
    DE = "de"
    FR = "fr"
    IT = "it"
    ES = "es"
    RO = "ro"

    @classmethod
    def parse(cls, value: object) -> LanguageCode | None:
        """Return the member for ``value``, or None when it is not supported."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return LANGUAGE_NAMES[self.value]


class SupportedLanguage(BaseModel):
    code: LanguageCode
    display_name: str


class MetaTag(BaseModel):
    name: str | None = None
    property: str | None = None
    content: str = ""

    @model_validator(mode="after")
    def _needs_selector(self) -> MetaTag:
        if not self.name and not self.property:
            raise ValueError("meta tag needs a name or a property")
        return self

    def matches(self, attribute: str, value: str) -> bool:
        return getattr(self, attribute, None) == value


class LanguageChanged(BaseModel):
    language: LanguageCode
