import json
from unittest.mock import patch

import pytest
import requests

from salesforce_pipeline.models import Session

from .helpers import ACCESS_TOKEN, INSTANCE_URL


@pytest.fixture
def mock_request():
    """Replaces the transport of every ``requests.Session``."""

    with patch.object(requests.Session, "request") as mocked:
        yield mocked


@pytest.fixture
def credentials_data():
    return {
        "grant_type": "password",
        "client_id": "3MVG9fake.client.id",
        "client_secret": "FAKESECRET",
        "username": "john@doe.example",
        "password": "hunter2",
    }


@pytest.fixture
def config_file(tmp_path, credentials_data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(credentials_data), encoding="utf-8")
    return path


@pytest.fixture
def session():
    return Session(access_token=ACCESS_TOKEN, instance_url=INSTANCE_URL, token_type="Bearer")
