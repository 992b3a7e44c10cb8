"""Shared form values for the test modules."""

VALID_VALUES = {
    "occupant_count": 2,
    "vehicle_count": 1,
    "direction": "Crescente",
    "weather": "Céu Claro",
    "road_type": "Dupla",
    "road_layout": "Curva;Declive",
    "state_code": "SP",
    "highway_number": 116,
    "month": "Março",
    "day": 15,
}

VALID_PAYLOAD = {
    "Pessoas": 2,
    "Veículos": 1,
    "Sentido": "Crescente",
    "Clima": "Céu Claro",
    "Pista": "Dupla",
    "Traçado": "Curva;Declive",
    "UF": "SP",
    "BR": 116,
    "Mês": "Março",
    "Dia": 15,
}


def fill(form, **overrides):
    for name, value in {**VALID_VALUES, **overrides}.items():
        form.set_field(name, value)
    return form
