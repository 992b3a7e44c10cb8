import pytest
from unittest.mock import MagicMock

from previsao_ileso.form_state import FormState
from tests.helpers import fill


# Every field filled with a valid value
@pytest.fixture
def form():
    return fill(FormState(strict_choices=False))


@pytest.fixture
def predictor():
    mock = MagicMock()
    mock.predict.return_value = 0.8734
    return mock


# Fake requests.Session: no test ever reaches the network
@pytest.fixture
def session():
    resp = MagicMock()
    resp.json.return_value = {"probabilidade_ileso": 0.8734}
    resp.raise_for_status.return_value = None
    resp.text = '{"probabilidade_ileso": 0.8734}'

    mock = MagicMock()
    mock.post.return_value = resp
    return mock
