"""Tests for branch naming utilities."""

import re
from pathlib import Path

import pytest

from planbranch.core.naming import (
    MAX_BRANCH_SEGMENT_LENGTH,
    extract_plan_name,
    feature_branch_name,
    sanitize_branch_segment,
)

SEGMENT_PATTERN = re.compile(r"^[a-z0-9]*(-[a-z0-9]+)*$")

SANITIZE_INPUTS = [
    "update-docs",
    "Update Docs",
    "  --Leading and trailing--  ",
    "Fix: Bug #123 (urgent!)",
    "café_au_lait",
    "a---b___c",
    "UPPER_snake_Case",
    "---",
    "",
    "🚀 launch 🎉",
    "x" * 80,
    "a" * 59 + "-" + "b" * 10,
    "ab-" * 30,
    "emoji🙂in🙂between",
]


# ── extract_plan_name ────────────────────────────────────────────────────────


class TestExtractPlanName:
    def test_strips_numeric_prefix(self) -> None:
        assert extract_plan_name(Path("/plans/58--update-docs")) == "update-docs"

    def test_accepts_string_path(self) -> None:
        assert extract_plan_name("plans/7--x") == "x"

    def test_keeps_double_hyphens_after_prefix(self) -> None:
        assert extract_plan_name("3--a--b") == "a--b"

    @pytest.mark.parametrize(
        "dir_name",
        [
            "update-docs",
            "58-update-docs",
            "v2--notes",
            "58--",
            "--name",
            "drafts",
            "58--docs\n",
            "٥٨--docs",
        ],
    )
    def test_non_matching_name_returned_unchanged(self, dir_name: str) -> None:
        assert extract_plan_name(Path("/plans") / dir_name) == dir_name

    def test_uses_base_name_only(self) -> None:
        assert extract_plan_name(Path("/12--outer/plans/notes")) == "notes"


# ── sanitize_branch_segment ──────────────────────────────────────────────────


class TestSanitizeBranchSegment:
    def test_lowercases_and_replaces_spaces(self) -> None:
        assert sanitize_branch_segment("Update Docs") == "update-docs"

    def test_replaces_punctuation_and_collapses(self) -> None:
        assert sanitize_branch_segment("Fix: Bug #123 (urgent!)") == "fix-bug-123-urgent"

    def test_underscores_become_hyphens(self) -> None:
        assert sanitize_branch_segment("a---b___c") == "a-b-c"

    def test_non_ascii_replaced(self) -> None:
        assert sanitize_branch_segment("café") == "caf"

    def test_only_separators_gives_empty_string(self) -> None:
        assert sanitize_branch_segment("---") == ""
        assert sanitize_branch_segment("") == ""

    def test_truncates_to_limit(self) -> None:
        assert sanitize_branch_segment("x" * 80) == "x" * MAX_BRANCH_SEGMENT_LENGTH

    def test_truncation_does_not_leave_trailing_hyphen(self) -> None:
        result = sanitize_branch_segment("a" * 59 + "-" + "b" * 10)
        assert result == "a" * 59

    @pytest.mark.parametrize("raw", SANITIZE_INPUTS)
    def test_is_idempotent(self, raw: str) -> None:
        once = sanitize_branch_segment(raw)
        assert sanitize_branch_segment(once) == once

    @pytest.mark.parametrize("raw", SANITIZE_INPUTS)
    def test_output_shape(self, raw: str) -> None:
        result = sanitize_branch_segment(raw)
        assert SEGMENT_PATTERN.match(result) is not None
        assert len(result) <= MAX_BRANCH_SEGMENT_LENGTH


# ── feature_branch_name ──────────────────────────────────────────────────────


def test_feature_branch_name_for_standard_plan() -> None:
    assert feature_branch_name("58", Path("/plans/58--update-docs")) == "feature/58--update-docs"


def test_feature_branch_name_sanitizes_plan_name() -> None:
    assert (
        feature_branch_name("4", Path("/plans/4--Add OAuth_Login")) == "feature/4--add-oauth-login"
    )


def test_feature_branch_name_allows_empty_segment() -> None:
    assert feature_branch_name("9", Path("/plans/9--!!!")) == "feature/9--"


def test_feature_branch_name_uses_whole_name_without_prefix() -> None:
    assert feature_branch_name("12", Path("/plans/Notes")) == "feature/12--notes"


def test_feature_branch_name_custom_prefix() -> None:
    assert feature_branch_name("1", Path("1--x"), prefix="plan") == "plan/1--x"
