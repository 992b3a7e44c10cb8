from collections import namedtuple

from previsao_ileso.submission import Status

SUBMIT_LABEL = "Prever probabilidade de sair ileso"
LOADING_LABEL = "Carregando..."
FORM_ERRORS_NOTICE = "Por favor, corrija os erros no formulário antes de enviar*"
FAILURE_TEXT = "Não foi possível obter a previsão. Tente novamente."

# kind is "warning" or "error", matching the st.<kind> call that shows it
Banner = namedtuple("Banner", ["kind", "text"])


def format_probability(probability):
    return f"{probability * 100:.2f}%"


def submit_label(state):
    return LOADING_LABEL if state.status is Status.PENDING else SUBMIT_LABEL


def render(state):
    """Banner to show under the form for ``state``, or None."""
    if state.status is Status.SUCCEEDED:
        return Banner(
            "warning",
            f"Probabilidade de sair ileso do acidente: **{format_probability(state.probability)}**",
        )
    if state.status is Status.FAILED:
        # details are in the log, the user only needs to know to retry
        return Banner("error", FAILURE_TEXT)
    return None
