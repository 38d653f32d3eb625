"""Shared fixtures for pig-latin tests."""

import pytest

from pig_latin.text import PigLatinTranslator


@pytest.fixture
def translator() -> PigLatinTranslator:
    """Return a fresh translator instance."""
    return PigLatinTranslator()


@pytest.fixture
def readme_english() -> str:
    """Two-paragraph English sample with hyphens, parentheses and newlines."""
    return (
        "This crate provides functions for translating English into Pig-Latin.\n"
        "\n"
        "The advantage of Pig-Latin is its extreme suitability to machine translation,\n"
        "without requiring any kind of machine learning (so long as you translate from English)."
    )


@pytest.fixture
def readme_pig_latin() -> str:
    """Expected translation of `readme_english`."""
    return (
        "Isthay atecray ovidespray unctionsfay orfay anslatingtray Englishhay intohay Igpay-Atinlay.\n"
        "\n"
        "Ethay advantagehay ofhay Igpay-Atinlay ishay itshay extremehay uitabilitysay otay achinemay anslationtray,\n"
        "ithoutway equiringray anyhay indkay ofhay achinemay earninglay (osay onglay ashay ouyay anslatetray omfray Englishhay)."
    )
