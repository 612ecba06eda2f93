import pytest

from core.config import SETTINGS, Language
from core.i18n import MISSING, leaf_paths, lookup, t
from core.state import set_active_language
from core.translations import EN, PL, TRANSLATIONS


def test_polish_is_default():
    assert t("common.remove") == "Usuń"


def test_switching_language_changes_output():
    assert t("common.remove") == "Usuń"
    set_active_language(Language.EN)
    assert t("common.remove") == "Remove"
    set_active_language(Language.PL)
    assert t("common.remove") == "Usuń"


def test_explicit_language_overrides_active():
    assert t("scan.browse", lang=Language.EN) == "Browse files"
    assert t("scan.browse") == "Wybierz plik"


@pytest.mark.parametrize("lang", list(Language))
def test_unknown_key_returns_key(lang):
    set_active_language(lang)
    assert t("nav.doesNotExist") == "nav.doesNotExist"
    assert t("") == ""
    assert t("nav..home") == "nav..home"


def test_path_past_leaf_is_not_found():
    assert lookup(TRANSLATIONS[Language.PL], "common.remove.extra") is MISSING
    assert t("common.remove.extra") == "common.remove.extra"


def test_section_key_is_not_a_string():
    assert lookup(TRANSLATIONS[Language.EN], "common") is MISSING
    assert t("common") == "common"


def test_falls_back_to_default_language(monkeypatch):
    trees = {
        Language.PL: {"only": {"pl": "tylko po polsku"}},
        Language.EN: {"only": {}},
    }
    monkeypatch.setattr("core.i18n.TRANSLATIONS", trees)
    set_active_language(Language.EN)
    assert t("only.pl") == "tylko po polsku"


def test_placeholder_substitution():
    set_active_language(Language.EN)
    assert t("review.subtitle", {"n": 5}).startswith("5 questions detected")
    assert t("result.title", title="Unit 5") == "Results — Unit 5"


def test_repeated_placeholder_replaced_everywhere(monkeypatch):
    monkeypatch.setattr(
        "core.i18n.TRANSLATIONS",
        {Language.PL: {"x": "{n} z {n}"}, Language.EN: {}},
    )
    assert t("x", {"n": 3}) == "3 z 3"


def test_missing_variable_leaves_token():
    assert t("set.questions") == "{n} pytań"
    assert t("set.questions", {"other": 1}) == "{n} pytań"


def test_resolution_is_idempotent():
    first = t("set.maxWords", {"n": 4})
    assert t("set.maxWords", {"n": 4}) == first == "Maks. 4 wyrazów"


@pytest.mark.parametrize("lang", list(Language))
def test_every_default_key_resolves_to_text(lang):
    set_active_language(lang)
    for key in leaf_paths(TRANSLATIONS[SETTINGS.default_language]):
        text = t(key)
        assert text
        assert text != key


def test_trees_have_identical_shape():
    assert leaf_paths(PL) == leaf_paths(EN)
    assert "review.subtitle" in leaf_paths(PL)


def test_trees_are_read_only():
    with pytest.raises(TypeError):
        TRANSLATIONS[Language.PL]["common"]["remove"] = "x"
