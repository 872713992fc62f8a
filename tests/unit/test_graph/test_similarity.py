"""Unit tests for pairwise record similarity."""

from __future__ import annotations

import pytest

from issuegraph.graph.similarity import SIMILARITY_THRESHOLD, similarity
from tests.helpers import make_record


def test_same_repo_overlapping_titles_and_shared_label():
    """"fix login bug" vs "fix login error" share 2 of 3 distinct words, so the title term is 0.4 * 2/3, not 0.4 * 3/4."""
    a = make_record("1", "fix login bug", repository="org/repo", labels=("bug",))
    b = make_record("2", "fix login error", repository="org/repo", labels=("bug",))
    # 2 of 3 title words, identical label sets, same repository
    expected = 0.4 * 2 / 3 + 0.3 + 0.2
    assert similarity(a, b) == pytest.approx(expected)
    assert similarity(a, b) > SIMILARITY_THRESHOLD


def test_unrelated_records_score_zero():
    a = make_record("1", "alpha beta", repository="x/one", author="ann")
    b = make_record("2", "gamma delta", repository="x/two", author="ben")
    assert similarity(a, b) == 0.0


def test_empty_titles_and_labels_contribute_nothing():
    a = make_record("1", "")
    b = make_record("2", "")
    assert similarity(a, b) == 0.0


def test_empty_repository_and_author_are_not_a_match():
    a = make_record("1", "one", repository="", author="")
    b = make_record("2", "two", repository="", author="")
    assert similarity(a, b) == 0.0


def test_author_bonus():
    a = make_record("1", "one", author="ann")
    b = make_record("2", "two", author="ann")
    assert similarity(a, b) == pytest.approx(0.1)


def test_label_overlap_uses_larger_set():
    a = make_record("1", "x1", labels=("bug", "ui"))
    b = make_record("2", "x2", labels=("bug",))
    assert similarity(a, b) == pytest.approx(0.3 * 0.5)


def test_is_symmetric():
    a = make_record("1", "crash on save crash", repository="o/r", author="ann", labels=("bug", "io"))
    b = make_record("2", "save dialog crash", repository="o/r", author="bob", labels=("io",))
    assert similarity(a, b) == similarity(b, a)


def test_is_clamped_to_one():
    a = make_record("1", "same title", repository="o/r", author="ann", labels=("bug",))
    b = make_record("2", "same title", repository="o/r", author="ann", labels=("bug",))
    assert similarity(a, b) == pytest.approx(1.0)
    assert similarity(a, b) <= 1.0
