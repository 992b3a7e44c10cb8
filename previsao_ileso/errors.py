class PredictionError(Exception):
    """Base class for everything that can stop a prediction."""


class ValidationError(PredictionError):
    """One or more form fields failed validation.

    ``errors`` maps the field name to the message shown under it.
    """

    def __init__(self, errors):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid fields: {fields}")


class NetworkError(PredictionError):
    """The prediction endpoint could not be reached or answered with an error status."""


class ResponseShapeError(PredictionError):
    """The endpoint answered, but without a usable ``probabilidade_ileso``."""
