"""Shared fixtures: isolated log dir, fresh store, Flask test client."""

import json
import os
import tempfile
from pathlib import Path

import pytest

# Keep module-import-time logging setup (app.py) out of the project logs/ dir.
os.environ.setdefault("RECEIPT_API_LOG_DIR", tempfile.mkdtemp(prefix="receipt_api_logs_"))

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"


def load_sample(name: str) -> dict:
    return json.loads((SAMPLES_DIR / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    d = tmp_path / "logs"
    monkeypatch.setenv("RECEIPT_API_LOG_DIR", str(d))
    return d


@pytest.fixture
def target_payload():
    return load_sample("target")


@pytest.fixture
def corner_market_payload():
    return load_sample("corner_market")


@pytest.fixture
def store():
    from src.store import ReceiptStore
    return ReceiptStore()


@pytest.fixture
def client(store):
    from app import create_app
    app = create_app(store)
    app.config["TESTING"] = True
    return app.test_client()
