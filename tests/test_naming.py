"""Tests for resgen.naming."""

from __future__ import annotations

import itertools
import random

import pytest

from resgen.models import AssetRef
from resgen.naming import disambiguate, name_for, resolve_collisions, split_words, to_identifier


@pytest.mark.parametrize(
    ("raw", "words"),
    [
        ("my_icon", ["my", "icon"]),
        ("my-icon", ["my", "icon"]),
        ("myIcon", ["my", "Icon"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("icon@2x", ["icon", "2", "x"]),
        ("café au lait", ["caf", "au", "lait"]),
        ("---", []),
    ],
)
def test_split_words(raw: str, words: list[str]) -> None:
    assert split_words(raw) == words


@pytest.mark.parametrize(
    ("raw", "lower", "upper"),
    [
        ("icon", "icon", "Icon"),
        ("my-icon", "myIcon", "MyIcon"),
        ("ic_launcher_round", "icLauncherRound", "IcLauncherRound"),
        ("HTTPServer", "httpServer", "HttpServer"),
        ("2x", "n2X", "N2X"),
        ("404", "n404", "N404"),
        ("home.title", "homeTitle", "HomeTitle"),
        ("", "unnamed", "Unnamed"),
        ("???", "unnamed", "Unnamed"),
    ],
)
def test_to_identifier_casing_and_prefixes(raw: str, lower: str, upper: str) -> None:
    assert to_identifier(raw) == lower
    assert to_identifier(raw, upper=True) == upper


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("class", "class_"),
        ("switch", "switch_"),
        ("null", "null_"),
        ("hash_code", "hashCode_"),
        ("to-string", "toString_"),
    ],
)
def test_to_identifier_avoids_reserved_words(raw: str, expected: str) -> None:
    assert to_identifier(raw) == expected
    assert to_identifier(raw, upper=True) == expected[0].upper() + expected[1:-1]


def test_resolve_collisions_keeps_unique_names_bare() -> None:
    assert resolve_collisions(["home", "settings"]) == {"home": "home", "settings": "settings"}


def test_resolve_collisions_disambiguates_sanitized_duplicates() -> None:
    names = resolve_collisions(["my-icon", "my_icon", "my icon"])

    assert names == {"my icon": "myIcon", "my-icon": "myIcon2", "my_icon": "myIcon3"}


def test_resolve_collisions_skips_suffixes_claimed_by_siblings() -> None:
    names = resolve_collisions(["icon", "Icon", "icon2"])

    assert names == {"Icon": "icon", "icon": "icon3", "icon2": "icon2"}
    assert len(set(names.values())) == 3


def test_resolve_collisions_respects_reserved_names() -> None:
    names = resolve_collisions(["of", "locale", "title"], reserved=["of", "locale"])

    assert names["of"] == "of2"
    assert names["locale"] == "locale2"
    assert names["title"] == "title"


def test_resolve_collisions_is_order_independent() -> None:
    raws = ["a-b", "a_b", "aB", "a b", "ab", "a.b", "aB2"]
    expected = resolve_collisions(raws)

    rng = random.Random(7)
    for _ in range(20):
        shuffled = raws[:]
        rng.shuffle(shuffled)
        assert resolve_collisions(shuffled) == expected
    assert len(set(expected.values())) == len(raws)


def test_disambiguate_groups_by_proposed_identifier() -> None:
    names = disambiguate({"logo.png": "logo", "logo.jpg": "logo", "logo": "logo"})

    assert names == {"logo": "logo", "logo.jpg": "logo2", "logo.png": "logo3"}


def test_resolve_collisions_uniqueness_over_many_variants() -> None:
    raws = [
        "".join(parts)
        for parts in itertools.product(["my", "My", "MY"], ["-", "_", ""], ["icon", "Icon"])
    ]

    names = resolve_collisions(raws)

    assert len(names) == len(set(raws))
    assert len(set(names.values())) == len(names)


def test_name_for_drops_asset_root_and_sanitizes_segments() -> None:
    assert name_for(AssetRef("images/icon.png")) == ((), "icon")
    assert name_for(AssetRef("images/sub/logo.png")) == (("sub",), "logo")
    assert name_for(AssetRef("assets/2x/ui-kit/close-button.svg")) == (("n2X", "uiKit"), "closeButton")
    assert name_for(AssetRef("root.png")) == ((), "root")


def test_name_for_is_deterministic() -> None:
    asset = AssetRef("assets/Some Dir/ÜberIcon@3x.png")

    assert name_for(asset) == name_for(AssetRef("assets/Some Dir/ÜberIcon@3x.png"))
    assert name_for(asset) == (("someDir",), "berIcon3X")
