# tests/conftest.py - shared fixtures

from pathlib import Path

import pytest

from glossary_browser.core.glossary import Glossary
from glossary_browser.entry import Entry
from glossary_browser.loader import load_glossary

DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "glossary.json"


@pytest.fixture
def data_path():
    return DATA_PATH


@pytest.fixture
def glossary():
    entries, category_order = load_glossary(DATA_PATH)
    return Glossary(entries, category_order)


@pytest.fixture
def chips():
    # title tokens score 10, synonym tokens 3
    return [
        Entry(id="cpu", title="CPU"),
        Entry(id="gpu", title="GPU"),
        Entry(id="apu", title="APU", synonyms=("cpu-gpu-hybrid",)),
    ]
