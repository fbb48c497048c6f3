import json
from pathlib import Path

import pytest

from rnacentral.schemas import EbiSearchConfig

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURES / name, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def config() -> EbiSearchConfig:
    return EbiSearchConfig(base_url="http://test")


@pytest.fixture
def id_response() -> dict:
    return load_fixture("id.json")


@pytest.fixture
def melanoma_response() -> dict:
    return load_fixture("melanoma.json")
