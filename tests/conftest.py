import json
from pathlib import Path

import pytest

from pywit.validator import load_exports

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def metadata_path():
    return FIXTURES / "component.json"


@pytest.fixture
def metadata_doc(metadata_path):
    return json.loads(metadata_path.read_text(encoding="utf-8"))


@pytest.fixture
def exports(metadata_doc):
    return load_exports(metadata_doc)
