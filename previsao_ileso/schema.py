"""Field declarations and validation rules for the accident form.

Each field has a Portuguese label, the name the predictor expects on the
wire, and an ordered list of ``(predicate, message)`` rules. The first rule
that fails gives the message shown under the field.
"""

import re
from dataclasses import dataclass, fields

from previsao_ileso.catalogs import CHOICES


@dataclass(frozen=True)
class InvalidNumber:
    """Stored in place of a number the user typed but that does not parse."""

    raw: object


@dataclass
class FormInput:
    occupant_count: int = 1
    vehicle_count: int = 1
    direction: str = ""
    weather: str = ""
    road_type: str = ""
    road_layout: str = ""
    state_code: str = ""
    highway_number: int = 0
    month: str = ""
    day: int = 1


FIELD_NAMES = [f.name for f in fields(FormInput)]

NUMERIC_FIELDS = {"occupant_count", "vehicle_count", "highway_number", "day"}

# Names expected by the prediction endpoint
WIRE_NAMES = {
    "occupant_count": "Pessoas",
    "vehicle_count": "Veículos",
    "direction": "Sentido",
    "weather": "Clima",
    "road_type": "Pista",
    "road_layout": "Traçado",
    "state_code": "UF",
    "highway_number": "BR",
    "month": "Mês",
    "day": "Dia",
}

LABELS = {
    "occupant_count": "Número de Pessoas",
    "vehicle_count": "Número de Veículos",
    "direction": "Sentido",
    "weather": "Clima",
    "road_type": "Tipo de Pista",
    "road_layout": "Traçado da Via",
    "state_code": "UF",
    "highway_number": "Número da BR",
    "month": "Mês",
    "day": "Dia",
}


def is_integer(value):
    # bool is an int subclass, but True is not a number of people
    return isinstance(value, int) and not isinstance(value, bool)


def _positive(value):
    return value > 0


def _filled(value):
    return isinstance(value, str) and value != ""


def _two_chars(value):
    return isinstance(value, str) and len(value) == 2


FIELD_RULES = {
    "occupant_count": [
        (is_integer, "O número de pessoas deve ser um número inteiro."),
        (_positive, "O número de pessoas deve ser positivo."),
    ],
    "vehicle_count": [
        (is_integer, "O número de veículos deve ser um número inteiro."),
        (_positive, "O número de veículos deve ser positivo."),
    ],
    "direction": [(_filled, "O sentido é obrigatório.")],
    "weather": [(_filled, "O clima é obrigatório.")],
    "road_type": [(_filled, "O tipo de pista é obrigatório.")],
    "road_layout": [(_filled, "O traçado da via é obrigatório.")],
    "state_code": [(_two_chars, "A UF deve ter exatamente 2 caracteres.")],
    "highway_number": [
        (is_integer, "O número da BR deve ser inteiro."),
        (_positive, "O número da BR deve ser positivo."),
    ],
    "month": [(_filled, "O mês é obrigatório.")],
    "day": [
        (is_integer, "O dia deve ser um número inteiro."),
        (lambda v: v >= 1, "O dia deve ser no mínimo 1."),
        (lambda v: v <= 31, "O dia deve ser no máximo 31."),
    ],
}

NOT_AN_OPTION = "Selecione uma das opções disponíveis."

_DIGITS = re.compile(r"-?[0-9]+")


def _rules_for(name, strict_choices):
    rules = FIELD_RULES[name]
    if strict_choices and name in CHOICES:
        allowed = CHOICES[name]
        rules = rules + [(lambda v: v in allowed, NOT_AN_OPTION)]
    return rules


def validate(candidate, strict_choices=False):
    """Return ``{field: message}`` for every failing field of ``candidate``.

    An empty dict means the candidate can be submitted. Dropdown-backed
    fields are only required to be non-empty unless ``strict_choices`` is
    set, in which case the value must also be one of the catalog options.
    """
    errors = {}
    for name in FIELD_NAMES:
        value = getattr(candidate, name)
        for check, message in _rules_for(name, strict_choices):
            if not check(value):
                errors[name] = message
                break
    return errors


def parse_int(raw):
    """Turn widget input into an int, or ``InvalidNumber`` if it is not one.

    Integral floats (what a number widget may hand back) are accepted; any
    other value, including text like ``"12a"``, is never coerced. Text must
    be plain ASCII digits with an optional leading minus, so ``"1_000"``,
    ``"+5"`` or padded text are rejected rather than read the way ``int()``
    would.
    """
    if is_integer(raw):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else InvalidNumber(raw)
    if isinstance(raw, str) and _DIGITS.fullmatch(raw):
        return int(raw)
    return InvalidNumber(raw)
