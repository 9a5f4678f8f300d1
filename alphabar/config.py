from typing import Any

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

# Setting name -> environment variable
ENV_NAMES = {
    "min_records": "ALPHABAR_MINIMUM_RECORDS",
    "all_option": "ALPHABAR_ALL_OPTION",
    "letter_param": "ALPHABAR_LETTER_PARAM",
}


def _setting_for(loc: str) -> str:
    """Maps a validation error location (field name or env alias) to a setting name."""
    for setting, env_name in ENV_NAMES.items():
        if loc.lower() in (setting, env_name.lower()):
            return setting
    return loc


class AlphabarConfig(BaseSettings):
    """
    Process-wide defaults for alphabar paginators.

    Constructing it loads ALPHABAR_MINIMUM_RECORDS, ALPHABAR_ALL_OPTION and
    ALPHABAR_LETTER_PARAM from the environment.
    Load once at application startup and pass it explicitly to
    BucketPaginator, alpha_scope and render_alphabar.

    Attributes:
        min_records: Below this many records the alphabar is not used and
            every record is returned. None disables the threshold.
        all_option: Whether an "All" group is offered.
        letter_param: Query string parameter carrying the selected group.
    """

    min_records: int | None = Field(
        default=None, ge=0, validation_alias=ENV_NAMES["min_records"]
    )
    all_option: bool = False
    letter_param: str = Field(default="ltr", min_length=1)

    model_config = SettingsConfigDict(
        env_prefix="ALPHABAR_",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    def __init__(self, **values: Any) -> None:
        try:
            super().__init__(**values)
        except PydanticValidationError as e:
            error = e.errors()[0]
            setting = _setting_for(str(error["loc"][0])) if error["loc"] else None
            raise ConfigurationError(
                f"Invalid {setting} ({ENV_NAMES.get(setting, setting)}): {error['msg']}",
                setting=setting,
                original_error=e,
            ) from e

    @classmethod
    def from_env(cls) -> "AlphabarConfig":
        """
        Build a config from environment variables only.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        return cls()
