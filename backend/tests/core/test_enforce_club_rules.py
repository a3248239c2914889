"""Club Rules — tests for pure club validation and payload shaping.

Tests cover:
    - check_club_fields enforces presence and length bounds
    - empty linktree counts as not provided
    - build_club_payload / build_club_patch apply defaults
"""

import pytest

from club_directory.core.enforce_club_rules import (
    build_club_patch,
    build_club_payload,
    check_club_fields,
    check_club_id,
    is_valid_club_data,
)


def _club(**overrides) -> dict:
    club = {"name": "Chess Club", "description": "We play chess"}
    club.update(overrides)
    return club


# ─── check_club_fields ───────────────────────────────────────────

def test_valid_club_passes():
    assert check_club_fields(_club()) is None


def test_missing_club_fails():
    error = check_club_fields(None)
    assert error["error_code"] == "INVALID_CLUB"
    assert error["field"] == "club"


@pytest.mark.parametrize("field", ["name", "description"])
def test_required_field_missing_fails(field):
    club = _club()
    del club[field]
    assert check_club_fields(club)["field"] == field


@pytest.mark.parametrize("field", ["name", "description"])
def test_required_field_empty_fails(field):
    assert check_club_fields(_club(**{field: ""}))["field"] == field


def test_name_bounds():
    assert check_club_fields(_club(name="x" * 50)) is None
    error = check_club_fields(_club(name="x" * 51))
    assert error["field"] == "name"
    assert "51" in error["message"]


def test_description_bounds():
    assert check_club_fields(_club(description="x" * 100)) is None
    assert check_club_fields(_club(description="x" * 101))["field"] == "description"


def test_linktree_is_optional():
    assert check_club_fields(_club(linktree=None)) is None
    assert check_club_fields(_club(linktree="")) is None


def test_linktree_bounds_when_present():
    assert check_club_fields(_club(linktree="https://linktr.ee/chess")) is None
    assert check_club_fields(_club(linktree="x" * 101))["field"] == "linktree"


def test_non_string_name_fails():
    assert check_club_fields(_club(name=42))["field"] == "name"


def test_is_valid_club_data_mirrors_check():
    assert is_valid_club_data(_club()) is True
    assert is_valid_club_data(_club(name="")) is False


# ─── check_club_id ───────────────────────────────────────────────

def test_check_club_id():
    assert check_club_id("abc") is None
    assert check_club_id("")["field"] == "id"
    assert check_club_id(None)["field"] == "id"


# ─── payload builders ────────────────────────────────────────────

def test_build_payload_applies_defaults():
    payload = build_club_payload(_club(linktree=""), "/default.png", "")
    assert payload == {
        "name": "Chess Club",
        "description": "We play chess",
        "linktree": "",
        "image": "/default.png",
    }


def test_build_payload_keeps_provided_values():
    payload = build_club_payload(
        _club(linktree="https://l.ink", image="/chess.png"), "/default.png", "",
    )
    assert payload["linktree"] == "https://l.ink"
    assert payload["image"] == "/chess.png"


def test_build_patch_resets_image_and_leaves_linktree():
    patch = build_club_patch(_club(id="abc"), "/default.png")
    assert patch == {
        "name": "Chess Club",
        "description": "We play chess",
        "image": "/default.png",
    }


def test_build_patch_carries_linktree_when_provided():
    patch = build_club_patch(_club(linktree="https://l.ink"), "/default.png")
    assert patch["linktree"] == "https://l.ink"
    assert "id" not in patch


def test_missing_name_is_never_filled_with_a_placeholder():
    club = {"description": "We play chess"}
    assert check_club_fields(club)["field"] == "name"
    assert not is_valid_club_data(club)
