"""Unit tests for NameGenerator and derive_attachment_name."""

import random

import pytest

from imgvault.api.rename import NameGenerator, derive_attachment_name
from imgvault.api.rename.derive_attachment_name import existing_disambiguator
from imgvault.api.rename.NameGenerator import DISAMBIGUATOR_ALPHABET

pytestmark = pytest.mark.rename


def test_name_generator_alphabet_and_length():
    generate = NameGenerator()
    for _ in range(50):
        value = generate()
        assert len(value) == 5
        assert set(value) <= set(DISAMBIGUATOR_ALPHABET)


def test_name_generator_seeded_is_reproducible():
    first = NameGenerator(random.Random(7))
    second = NameGenerator(random.Random(7))
    assert [first() for _ in range(3)] == [second() for _ in range(3)]


@pytest.mark.parametrize(
    ("stem", "expected"),
    [("old_x9z2q", "x9z2q"), ("a_b_c_XY12z", "XY12z"), ("old", None), ("old_x9z2", None), ("oldx9z2q", None)],
)
def test_existing_disambiguator(stem, expected):
    assert existing_disambiguator(stem) == expected


def test_reuses_disambiguator_and_folder():
    def fail():
        raise AssertionError("generator must not be called")

    assert derive_attachment_name("attachments/old_x9z2q.png", "new", fail) == "attachments/new_x9z2q.png"


def test_generates_when_missing():
    assert derive_attachment_name("pics/photo.jpeg", "trip", lambda: "m3n4p") == "pics/trip_m3n4p.jpeg"
