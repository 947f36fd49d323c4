from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from fastapi.testclient import TestClient

from suntimes.config import ALGORITHM_ENV


@pytest.fixture(autouse=True)
def default_algorithm(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ALGORITHM_ENV, raising=False)


@pytest.fixture(scope="session")
def api_client() -> Iterable[TestClient]:
    from suntimes_api import app

    with TestClient(app) as client:
        yield client
