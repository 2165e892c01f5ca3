from services.term_matcher import (
    EXACT_MATCH,
    NO_MATCH,
    PARTIAL_MATCH,
    best_match,
    families_of,
    has_exact,
    match_strength,
    unique_terms,
)


def test_exact_match_ignores_case_and_diacritics():
    assert match_strength("React", "react") == EXACT_MATCH
    assert match_strength("Yazılım", "yazilim") == EXACT_MATCH


def test_containment_is_partial():
    assert match_strength("react", "React Native") == PARTIAL_MATCH
    assert match_strength("sql", "PostgreSQL") == PARTIAL_MATCH


def test_short_terms_do_not_match_by_containment():
    assert match_strength("ui", "guide") == NO_MATCH


def test_family_bridges_languages():
    assert match_strength("Software Developer", "Yazılım Mühendisi") == PARTIAL_MATCH
    assert match_strength("marketing", "Dijital Pazarlama") == PARTIAL_MATCH


def test_family_markers_are_whole_words():
    # "java" must not fire inside "javanese", "ai" not inside "email"
    assert families_of("javanese") == frozenset()
    assert families_of("email marketing") == frozenset({"marketing"})


def test_fuzzy_spelling_variant():
    assert match_strength("kubernetes", "kubernets") == PARTIAL_MATCH


def test_unrelated_terms():
    assert match_strength("accounting", "figma") == NO_MATCH
    assert match_strength("", "figma") == NO_MATCH


def test_best_match_prefers_exact():
    assert best_match("react", ["React Native", "react"]) == EXACT_MATCH
    assert best_match("react", []) == NO_MATCH


def test_has_exact():
    assert has_exact(["Software Developer"], ["software developer"])
    assert not has_exact(["Software Developer"], ["Senior Software Developer"])
    assert not has_exact([], ["x"])


def test_unique_terms_keeps_first_spelling():
    assert unique_terms(["React", "react", "", "Node.js"]) == ["React", "Node.js"]
