"""Minimal internationalization helpers."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Set

from core.config import SETTINGS, Language
from core.state import get_active_language
from core.translations import TRANSLATIONS

logger = logging.getLogger(__name__)

MISSING = object()


def lookup(tree: Mapping[str, Any], key: str) -> Any:
    """Walk ``tree`` along the dot-separated ``key``.

    Returns the leaf string, or ``MISSING`` when the path does not exist or
    does not end on a string.
    """
    node: Any = tree
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return MISSING
        node = node[part]
    return node if isinstance(node, str) else MISSING


def t(
    key: str,
    variables: Optional[Mapping[str, Any]] = None,
    lang: Optional[Language] = None,
    **kwargs: Any,
) -> str:
    """Translate ``key`` into the active (or given) language.

    Falls back to the default language, then to ``key`` itself. Every
    ``{name}`` token is replaced with ``str(value)`` for each entry of
    ``variables`` and ``kwargs``.
    """
    lang = get_active_language() if lang is None else lang
    text = lookup(TRANSLATIONS.get(lang, {}), key)
    if text is MISSING and lang != SETTINGS.default_language:
        logger.debug("missing %s translation for %r", lang, key)
        text = lookup(TRANSLATIONS[SETTINGS.default_language], key)
    if text is MISSING:
        logger.debug("no translation for %r", key)
        text = key
    values = dict(variables or {}, **kwargs)
    for name, value in values.items():
        text = text.replace("{%s}" % name, str(value))
    return text


def leaf_paths(tree: Mapping[str, Any], prefix: str = "") -> Set[str]:
    """Return the dot-paths of every leaf string in ``tree``."""
    paths: Set[str] = set()
    for name, node in tree.items():
        path = f"{prefix}{name}"
        if isinstance(node, Mapping):
            paths |= leaf_paths(node, path + ".")
        elif isinstance(node, str):
            paths.add(path)
    return paths
