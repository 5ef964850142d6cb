from core.config import DEFAULT_CONFIG, DEFAULT_SPECIAL
from ui.encryption_page import special_set_for


def test_checker_uses_custom_symbols():
    assert special_set_for(DEFAULT_CONFIG, "~^") == "~^"


def test_checker_falls_back_to_configured_symbols():
    assert special_set_for(DEFAULT_CONFIG, "") == DEFAULT_SPECIAL


def test_space_is_a_valid_symbol():
    assert special_set_for(DEFAULT_CONFIG, " #") == " #"
