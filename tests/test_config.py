import pydantic
import pytest

from lexoffice_delivery.config import LEXOFFICE_SCHEMA, LexofficeConfig, check_attributes


def test_config_from_attributes():
    config = LexofficeConfig.from_attributes(
        {"lexoffice.apikey": "xyz", "lexoffice.shipping-days": "1", "lexoffice.payment-days": 10}
    )
    assert config.api_key.get_secret_value() == "xyz"
    assert config.shipping_days == 1
    assert config.payment_days == 10


def test_config_defaults():
    config = LexofficeConfig.from_attributes({"lexoffice.apikey": "xyz", "lexoffice.payment-days": ""})
    assert config.shipping_days == 3
    assert config.payment_days == 3


def test_config_requires_api_key():
    with pytest.raises(pydantic.ValidationError):
        LexofficeConfig.from_attributes({"lexoffice.shipping-days": 2})


def test_config_rejects_empty_api_key():
    with pytest.raises(pydantic.ValidationError):
        LexofficeConfig(api_key="")


def test_config_is_frozen():
    config = LexofficeConfig(api_key="xyz")
    with pytest.raises(pydantic.ValidationError):
        config.payment_days = 5


@pytest.mark.parametrize("value, valid", [(3, True), ("3", True), (0, True), ("3.5", False), ("drei", False), ("-1", False), (-2, False), ("", True)])
def test_check_attributes_integer(value, valid):
    result = check_attributes(LEXOFFICE_SCHEMA, {"lexoffice.apikey": "xyz", "lexoffice.shipping-days": value})
    error = result["lexoffice.shipping-days"]
    if valid:
        assert error is None
    else:
        assert error.startswith('Invalid value for "lexoffice.shipping-days"')


@pytest.mark.parametrize(
    "attributes",
    [
        {"lexoffice.apikey": "xyz", "lexoffice.shipping-days": "-1", "lexoffice.payment-days": "2.0"},
        {"lexoffice.apikey": "xyz", "lexoffice.shipping-days": 1, "lexoffice.payment-days": 10},
        {"lexoffice.apikey": "xyz", "lexoffice.payment-days": "2.5"},
        {"lexoffice.apikey": "", "lexoffice.payment-days": 1},
    ],
)
def test_check_attributes_matches_config(attributes):
    """Attributes pass the backend check exactly when the config accepts them"""
    accepted = all(error is None for error in check_attributes(LEXOFFICE_SCHEMA, attributes).values())
    try:
        LexofficeConfig.from_attributes(attributes)
    except pydantic.ValidationError:
        built = False
    else:
        built = True
    assert accepted == built


def test_check_attributes_string():
    result = check_attributes(LEXOFFICE_SCHEMA, {"lexoffice.apikey": 123})
    assert result["lexoffice.apikey"].startswith('Invalid value for "lexoffice.apikey"')


def test_check_attributes_ignores_unknown_keys():
    result = check_attributes(LEXOFFICE_SCHEMA, {"lexoffice.apikey": "xyz", "other": 1})
    assert set(result) == set(LEXOFFICE_SCHEMA)
