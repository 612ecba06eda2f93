"""Supported UI languages and i18n settings."""
from __future__ import annotations

from enum import Enum
from typing import Tuple, Union

from pydantic import BaseModel, model_validator


class Language(str, Enum):
    PL = "pl"
    EN = "en"

    def __str__(self) -> str:
        return self.value


class I18nSettings(BaseModel):
    default_language: Language = Language.PL
    supported: Tuple[Language, ...] = tuple(Language)

    @model_validator(mode="after")
    def _default_is_supported(self) -> "I18nSettings":
        if self.default_language not in self.supported:
            raise ValueError(
                f"default language {self.default_language!s} is not supported"
            )
        return self


SETTINGS = I18nSettings()


def coerce_language(value: Union[Language, str]) -> Language:
    """Return the :class:`Language` for ``value`` (a tag or a plain code)."""
    try:
        lang = Language(str(value).lower())
    except ValueError:
        raise ValueError(f"unsupported language: {value!r}") from None
    if lang not in SETTINGS.supported:
        raise ValueError(f"unsupported language: {value!r}")
    return lang
