import logging
from dataclasses import replace

from previsao_ileso import config
from previsao_ileso.highway import NumericHighwayInput
from previsao_ileso.schema import FIELD_NAMES, NUMERIC_FIELDS, FormInput, parse_int, validate

logger = logging.getLogger(__name__)


class FormState:
    """Current values of the accident form and their validation result.

    Values start at the defaults of ``FormInput`` and are kept across
    submissions so the user can fix a field and try again.
    """

    def __init__(self, highway_input=None, strict_choices=None):
        self.highway_input = highway_input or NumericHighwayInput()
        self.strict_choices = config.STRICT_CHOICES if strict_choices is None else strict_choices
        self._values = FormInput()

    def set_field(self, name, raw_value):
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown form field: {name}")

        if name == "highway_number":
            value = self.highway_input.parse(raw_value)
        elif name in NUMERIC_FIELDS:
            value = parse_int(raw_value)
        elif raw_value is None:
            # selectbox with nothing picked yet
            value = ""
        else:
            value = raw_value

        self._values = replace(self._values, **{name: value})
        logger.debug(f"Field {name} set to {value!r}")

    def get_field(self, name):
        return getattr(self._values, name)

    def get_errors(self):
        return validate(self._values, strict_choices=self.strict_choices)

    def is_valid(self):
        return not self.get_errors()

    def to_input(self):
        """Snapshot of the current values, safe to hand to the predictor."""
        return replace(self._values)
