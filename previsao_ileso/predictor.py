import logging
import math

import requests

from previsao_ileso import config
from previsao_ileso.errors import NetworkError, ResponseShapeError, ValidationError
from previsao_ileso.schema import FIELD_NAMES, NUMERIC_FIELDS, WIRE_NAMES, is_integer

logger = logging.getLogger(__name__)

PROBABILITY_FIELD = "probabilidade_ileso"


class PredictorClient:
    """Posts one accident to the prediction endpoint and reads back the probability.

    No retries: a failed call is reported to the caller, who decides whether
    the user should try again.
    """

    def __init__(self, url=None, timeout=None, session=None):
        self.url = url or config.PREDICT_URL
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
        # shared session owned by the caller; otherwise one per request
        self._session = session

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self._session is not None:
            self._session.close()

    def build_payload(self, form_input):
        """Map a ``FormInput`` to the JSON body, keyed by the predictor's names.

        Raises ``ValidationError`` if a numeric field (the BR number in
        particular) is not an integer; such a payload is never sent.
        """
        bad = {
            name: f"{WIRE_NAMES[name]} deve ser um número inteiro."
            for name in NUMERIC_FIELDS
            if not is_integer(getattr(form_input, name))
        }
        if bad:
            raise ValidationError(bad)
        return {WIRE_NAMES[name]: getattr(form_input, name) for name in FIELD_NAMES}

    def predict(self, form_input):
        payload = self.build_payload(form_input)
        logger.info(f"Sending prediction request to {self.url}: {payload}")

        try:
            resp = self._post(payload)
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Unable to get prediction from {self.url}: {e}") from e

        # Backend may answer with an HTML error page
        try:
            body = resp.json()
        except ValueError as e:
            raise ResponseShapeError(f"Response is not JSON: {resp.text[:200]!r}") from e

        probability = parse_probability(body)
        logger.info(f"Prediction result: {probability}")
        return probability

    def _post(self, payload):
        if self._session is not None:
            return self._session.post(self.url, json=payload, timeout=self.timeout)
        with requests.Session() as session:
            return session.post(self.url, json=payload, timeout=self.timeout)


def parse_probability(body):
    """Extract ``probabilidade_ileso`` from a decoded response body."""
    if not isinstance(body, dict):
        raise ResponseShapeError(f"Expected a JSON object, got {type(body).__name__}")
    if PROBABILITY_FIELD not in body:
        raise ResponseShapeError(f"Missing {PROBABILITY_FIELD!r} in response: {body}")

    value = body[PROBABILITY_FIELD]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ResponseShapeError(f"{PROBABILITY_FIELD} is not a number: {value!r}")
    if math.isnan(value) or not 0 <= value <= 1:
        raise ResponseShapeError(f"{PROBABILITY_FIELD} outside [0, 1]: {value!r}")
    return float(value)
