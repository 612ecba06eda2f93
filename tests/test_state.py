import pytest

from core import state
from core.config import I18nSettings, Language, coerce_language


def test_initial_language_is_default():
    assert state.get_active_language() is Language.PL


def test_set_is_observed_immediately():
    state.set_active_language(Language.EN)
    assert state.get_active_language() is Language.EN


def test_subscribers_notified_on_change_only():
    seen = []
    unsubscribe = state.subscribe(seen.append)
    state.set_active_language(Language.EN)
    state.set_active_language(Language.EN)
    state.set_active_language(Language.PL)
    assert seen == [Language.EN, Language.PL]

    unsubscribe()
    state.set_active_language(Language.EN)
    assert seen == [Language.EN, Language.PL]


def test_toggle_switches_between_languages():
    assert state.other_language() is Language.EN
    assert state.toggle_language() is Language.EN
    assert state.get_active_language() is Language.EN
    assert state.other_language() is Language.PL
    assert state.toggle_language() is Language.PL


def test_reset_restores_default():
    state.subscribe(lambda tag: None)
    state.set_active_language(Language.EN)
    state.reset()
    assert state.get_active_language() is Language.PL
    assert state._listeners == []


def test_coerce_language_accepts_codes():
    assert coerce_language("en") is Language.EN
    assert coerce_language("PL") is Language.PL
    assert coerce_language(Language.EN) is Language.EN
    with pytest.raises(ValueError):
        coerce_language("de")


def test_settings_reject_unsupported_default():
    with pytest.raises(ValueError):
        I18nSettings(default_language=Language.EN, supported=(Language.PL,))
