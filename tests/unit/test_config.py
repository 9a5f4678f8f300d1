"""
Unit tests for AlphabarConfig (pydantic-settings).
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from alphabar import BucketPaginator
from alphabar.config import AlphabarConfig
from alphabar.exceptions import ConfigurationError


@pytest.mark.unit
class TestAlphabarConfig:
    """Test AlphabarConfig defaults and validation."""

    def test_defaults(self) -> None:
        config = AlphabarConfig()

        assert config.min_records is None
        assert config.all_option is False
        assert config.letter_param == "ltr"

    def test_negative_min_records_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="min_records") as exc_info:
            AlphabarConfig(min_records=-1)
        assert exc_info.value.setting == "min_records"
        assert isinstance(exc_info.value.original_error, PydanticValidationError)

    def test_empty_letter_param_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="letter_param") as exc_info:
            AlphabarConfig(letter_param="")
        assert exc_info.value.setting == "letter_param"

    def test_equality(self) -> None:
        assert AlphabarConfig(min_records=5) == AlphabarConfig(min_records=5)
        assert AlphabarConfig(min_records=5) != AlphabarConfig(min_records=6)

    def test_paginator_takes_defaults_from_config(self) -> None:
        paginator = BucketPaginator("name", config=AlphabarConfig(min_records=20, all_option=True))

        assert paginator.min_records == 20
        assert paginator.all_option is True

    def test_paginator_without_config(self) -> None:
        paginator = BucketPaginator("name")

        assert paginator.min_records is None
        assert paginator.all_option is False

    def test_paginator_without_config_ignores_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("ALPHABAR_MINIMUM_RECORDS", "50")
        monkeypatch.setenv("ALPHABAR_ALL_OPTION", "true")

        paginator = BucketPaginator("name")

        assert paginator.min_records is None
        assert paginator.all_option is False


@pytest.mark.unit
class TestFromEnv:
    """Test loading the process-wide defaults from the environment."""

    def test_empty_environment_gives_defaults(self) -> None:
        assert AlphabarConfig.from_env() == AlphabarConfig()

    def test_reads_all_variables(self, monkeypatch) -> None:
        monkeypatch.setenv("ALPHABAR_MINIMUM_RECORDS", "25")
        monkeypatch.setenv("ALPHABAR_ALL_OPTION", "yes")
        monkeypatch.setenv("ALPHABAR_LETTER_PARAM", "letter")

        config = AlphabarConfig.from_env()

        assert config == AlphabarConfig(min_records=25, all_option=True, letter_param="letter")

    def test_field_name_is_not_an_env_variable(self, monkeypatch) -> None:
        """Only ALPHABAR_MINIMUM_RECORDS sets min_records."""
        monkeypatch.setenv("ALPHABAR_MIN_RECORDS", "25")

        assert AlphabarConfig.from_env().min_records is None

    def test_blank_minimum_is_unset(self, monkeypatch) -> None:
        monkeypatch.setenv("ALPHABAR_MINIMUM_RECORDS", "")
        assert AlphabarConfig.from_env().min_records is None

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off", ""])
    def test_false_values(self, monkeypatch, raw) -> None:
        monkeypatch.setenv("ALPHABAR_ALL_OPTION", raw)
        assert AlphabarConfig.from_env().all_option is False

    def test_invalid_minimum(self, monkeypatch) -> None:
        monkeypatch.setenv("ALPHABAR_MINIMUM_RECORDS", "ten")

        with pytest.raises(ConfigurationError, match="ALPHABAR_MINIMUM_RECORDS") as exc_info:
            AlphabarConfig.from_env()

        assert exc_info.value.setting == "min_records"
        assert isinstance(exc_info.value.original_error, PydanticValidationError)

    def test_negative_minimum(self, monkeypatch) -> None:
        monkeypatch.setenv("ALPHABAR_MINIMUM_RECORDS", "-5")

        with pytest.raises(ConfigurationError, match="ALPHABAR_MINIMUM_RECORDS"):
            AlphabarConfig.from_env()

    def test_invalid_boolean(self, monkeypatch) -> None:
        monkeypatch.setenv("ALPHABAR_ALL_OPTION", "maybe")

        with pytest.raises(ConfigurationError, match="ALPHABAR_ALL_OPTION") as exc_info:
            AlphabarConfig.from_env()

        assert exc_info.value.setting == "all_option"
