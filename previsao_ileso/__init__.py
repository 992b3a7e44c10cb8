"""Client for the "probability of leaving an accident unharmed" predictor."""

__version__ = "0.1.0"
