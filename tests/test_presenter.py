import pytest

from previsao_ileso import presenter
from previsao_ileso.submission import SubmissionState


def test_probability_is_shown_as_percentage_with_two_decimals():
    assert presenter.format_probability(0.8734) == "87.34%"
    assert presenter.format_probability(1) == "100.00%"
    assert presenter.format_probability(0.0) == "0.00%"


def test_success_renders_warning_banner():
    banner = presenter.render(SubmissionState.succeeded(0.8734))

    assert banner.kind == "warning"
    assert "87.34%" in banner.text
    assert banner.text.startswith("Probabilidade de sair ileso do acidente")


@pytest.mark.parametrize("state", [SubmissionState.idle(), SubmissionState.pending()])
def test_no_banner_before_a_result(state):
    assert presenter.render(state) is None


def test_failure_renders_error_without_probability():
    banner = presenter.render(SubmissionState.failed("Missing 'probabilidade_ileso'"))

    assert banner.kind == "error"
    assert "%" not in banner.text
    assert "probabilidade_ileso" not in banner.text


def test_submit_label_switches_while_loading():
    assert presenter.submit_label(SubmissionState.pending()) == "Carregando..."
    assert presenter.submit_label(SubmissionState.idle()) == "Prever probabilidade de sair ileso"
    assert presenter.submit_label(SubmissionState.failed("x")) == presenter.SUBMIT_LABEL
