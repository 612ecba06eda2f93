"""Process-wide active UI language.

The active language is a single shared value read by every render and written
by the language toggle. Interested parties can ``subscribe`` to be told about
changes; the Streamlit layer uses this to mirror the tag into
``st.session_state``.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

from core.config import SETTINGS, Language

logger = logging.getLogger(__name__)

Listener = Callable[[Language], None]

_lock = threading.Lock()
_active: Language = SETTINGS.default_language
_listeners: List[Listener] = []


def get_active_language() -> Language:
    """Return the currently active language tag."""
    with _lock:
        return _active


def set_active_language(tag: Language) -> None:
    """Make ``tag`` the active language and notify subscribers on change."""
    global _active
    with _lock:
        previous = _active
        _active = tag
        listeners = list(_listeners) if tag != previous else []
    if tag != previous:
        logger.info("UI language changed: %s -> %s", previous, tag)
    for listener in listeners:
        listener(tag)


def subscribe(listener: Listener) -> Callable[[], None]:
    """Register ``listener`` for language changes; returns an unsubscribe callable."""
    with _lock:
        _listeners.append(listener)

    def unsubscribe() -> None:
        with _lock:
            if listener in _listeners:
                _listeners.remove(listener)

    return unsubscribe


def other_language(tag: Optional[Language] = None) -> Language:
    """Return the language the toggle switches to from ``tag`` (default: active)."""
    current = get_active_language() if tag is None else tag
    supported = SETTINGS.supported
    idx = supported.index(current) if current in supported else -1
    return supported[(idx + 1) % len(supported)]


def toggle_language() -> Language:
    """Switch to the other language and return it."""
    nxt = other_language()
    set_active_language(nxt)
    return nxt


def reset() -> None:
    """Restore the default language and drop all subscribers."""
    global _active
    with _lock:
        _active = SETTINGS.default_language
        _listeners.clear()
