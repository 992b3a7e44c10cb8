import logging
from dataclasses import dataclass
from enum import Enum

from previsao_ileso.errors import PredictionError

logger = logging.getLogger(__name__)


class Status(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SubmissionState:
    status: Status = Status.IDLE
    probability: float = None
    error: str = None

    @classmethod
    def idle(cls):
        return cls(Status.IDLE)

    @classmethod
    def pending(cls):
        return cls(Status.PENDING)

    @classmethod
    def succeeded(cls, probability):
        return cls(Status.SUCCEEDED, probability=probability)

    @classmethod
    def failed(cls, error):
        return cls(Status.FAILED, error=error)


class SubmissionController:
    """Drives one prediction request per user submit.

    Only one request may be in flight: a submit arriving while the state is
    ``PENDING`` is dropped here, whether or not the button was disabled.
    """

    def __init__(self, form, predictor):
        self.form = form
        self.predictor = predictor
        self.state = SubmissionState.idle()
        # turned on by the first submit with errors, then errors render live
        self.show_errors = False

    @property
    def is_pending(self):
        return self.state.status is Status.PENDING

    def submit(self):
        if self.is_pending:
            logger.warning("Submit ignored: a prediction is already in flight")
            return self.state

        errors = self.form.get_errors()
        if errors:
            self.show_errors = True
            logger.info(f"Submit blocked by invalid fields: {sorted(errors)}")
            return self.state

        self.state = SubmissionState.pending()
        try:
            probability = self.predictor.predict(self.form.to_input())
        except PredictionError as e:
            logger.error(f"Error submitting form: {e}")
            self.state = SubmissionState.failed(str(e))
        else:
            self.state = SubmissionState.succeeded(probability)
        finally:
            if self.is_pending:
                # anything not caught above still must not leave the form stuck
                self.state = SubmissionState.failed("Unexpected error during prediction")
        return self.state
