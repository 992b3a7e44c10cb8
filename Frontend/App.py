import streamlit as st

from introduction import render_introduction
from previsao_ileso import config, presenter
from previsao_ileso.catalogs import DIRECTIONS, MONTHS, ROAD_LAYOUTS, ROAD_TYPES, STATES, WEATHER
from previsao_ileso.form_state import FormState
from previsao_ileso.highway import highway_input
from previsao_ileso.predictor import PredictorClient
from previsao_ileso.schema import LABELS
from previsao_ileso.submission import SubmissionController

# ------------------------------------------------------------
# Config
# ------------------------------------------------------------
config.configure_logging()
st.set_page_config(page_title="Previsão de Sair Ileso", page_icon="🚗", layout="wide")

# Form values and the submission state survive Streamlit reruns
if "controller" not in st.session_state:
    form = FormState(highway_input=highway_input(config.HIGHWAY_INPUT))
    st.session_state.controller = SubmissionController(form, PredictorClient())

controller = st.session_state.controller
form = controller.form

st.title("Sistema de Previsão de Probabilidade de Sair Ileso em um Acidente de Trânsito")
st.subheader("🚗 Previsão da Probabilidade de Sair Ileso em um Acidente de Trânsito")

# ------------------------------------------------------------
# Inputs
# ------------------------------------------------------------
error_slots = {}


def number_field(name, default):
    value = st.number_input(LABELS[name], value=default, step=1, key=name)
    error_slots[name] = st.empty()
    form.set_field(name, value)


def select_field(name, options, placeholder, format_func=str):
    value = st.selectbox(
        LABELS[name],
        options,
        index=None,
        placeholder=placeholder,
        format_func=format_func,
        key=name,
    )
    error_slots[name] = st.empty()
    form.set_field(name, value)


def highway_field():
    strategy = form.highway_input
    if strategy.mode == "catalog":
        select_field(
            "highway_number",
            strategy.options,
            "Selecione ou digite a BR",
            format_func=lambda br: f"BR-{br}",
        )
    else:
        number_field("highway_number", 0)


col1, col2 = st.columns(2)

with col1:
    number_field("occupant_count", 1)
    select_field("direction", DIRECTIONS, "Selecione o sentido")
    select_field("road_type", ROAD_TYPES, "Selecione o tipo de pista")
    select_field("state_code", STATES, "Selecione a UF")
    select_field("month", MONTHS, "Selecione o mês")

with col2:
    number_field("vehicle_count", 1)
    select_field("weather", WEATHER, "Selecione o clima")
    select_field(
        "road_layout",
        list(ROAD_LAYOUTS),
        "Selecione o traçado",
        format_func=ROAD_LAYOUTS.get,
    )
    highway_field()
    number_field("day", 1)

# ------------------------------------------------------------
# Predict
# ------------------------------------------------------------
st.caption(f"API endpoint: {config.PREDICT_URL}")

button_slot = st.empty()
clicked = button_slot.button(
    presenter.submit_label(controller.state),
    type="primary",
    disabled=controller.is_pending,
    key="submit",
)
if clicked:
    button_slot.button(presenter.LOADING_LABEL, disabled=True, key="submit_loading")
    controller.submit()
    st.rerun()

if controller.show_errors:
    errors = form.get_errors()
    for name, message in errors.items():
        error_slots[name].markdown(f":red[{message}]")
    if errors:
        st.markdown(f":red[{presenter.FORM_ERRORS_NOTICE}]")

banner = presenter.render(controller.state)
if banner is not None:
    getattr(st, banner.kind)(banner.text, icon="⚠️")

st.divider()
render_introduction()
