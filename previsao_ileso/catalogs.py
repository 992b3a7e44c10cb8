# ------------------------------------------------------------
# Dropdown options (values are sent verbatim to the predictor)
# ------------------------------------------------------------
DIRECTIONS = ["Crescente", "Decrescente"]

WEATHER = ["Vento", "Garoa/Chuvisco", "Nublado", "Céu Claro", "Sol", "Chuva"]

ROAD_TYPES = ["Simples", "Dupla", "Múltipla"]

# value -> label shown in the selectbox
ROAD_LAYOUTS = {
    "Reta": "Reta",
    "Reta;Aclive": "Reta com Aclive",
    "Reta;Declive": "Reta com Declive",
    "Curva": "Curva",
    "Curva;Declive": "Curva com Declive",
    "Curva;Aclive": "Curva com Aclive",
    "Interseção de Vias": "Interseção de Vias",
    "Retorno Regulamentado": "Retorno Regulamentado",
    "Viaduto": "Viaduto",
    "Rotatória": "Rotatória",
    "Em Obras": "Em Obras",
}

STATES = [
    "AC", "AL", "AM", "AP", "BA", "CE", "DF", "ES", "GO", "MA", "MG", "MS",
    "MT", "PA", "PB", "PE", "PI", "PR", "RJ", "RN", "RO", "RR", "RS", "SC",
    "SE", "SP", "TO",
]

MONTHS = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]

# Federal highways (BR-xxx) with recorded accidents. Kept as text because the
# selector shows them the way they are written on road signs.
HIGHWAYS = [
    "010", "020", "030", "040", "050", "060", "070", "080", "101", "104",
    "110", "116", "135", "146", "153", "155", "156", "158", "163", "174",
    "222", "226", "230", "232", "235", "242", "251", "262", "265", "267",
    "272", "277", "280", "282", "285", "287", "290", "304", "316", "324",
    "343", "364", "365", "369", "376", "381", "386", "392", "401", "402",
    "407", "408", "412", "414", "421", "423", "428", "470", "471", "472",
    "487", "488", "493",
]

# field -> allowed values, used by the schema when strict checking is on
CHOICES = {
    "direction": DIRECTIONS,
    "weather": WEATHER,
    "road_type": ROAD_TYPES,
    "road_layout": list(ROAD_LAYOUTS),
    "state_code": STATES,
    "month": MONTHS,
}
