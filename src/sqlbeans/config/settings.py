"""Settings that tune how catalog rows become beans."""

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "SQLBEANS_"
DEFAULT_ENUM_NAME_SUFFIX = "Enum"
DEFAULT_CURRENT_TIMESTAMP_FUNCTIONS = [
    "current_timestamp",
    "now",
    "localtimestamp",
    "localtime",
]

_TRUTHY = {"true", "1", "yes", "on"}
_FALSEY = {"false", "0", "no", "off"}


def _flag(environ: Mapping[str, str], field_name: str, default: bool) -> bool:
    raw = environ.get(ENV_PREFIX + field_name.upper())
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSEY:
        return False
    raise ValueError(
        f"{ENV_PREFIX}{field_name.upper()} must be one of "
        f"{sorted(_TRUTHY | _FALSEY)}, got '{raw}'."
    )


def _names(environ: Mapping[str, str], field_name: str, default: List[str]) -> List[str]:
    raw = environ.get(ENV_PREFIX + field_name.upper())
    if raw is None:
        return list(default)
    return [name for name in (part.strip() for part in raw.split(",")) if name]


class BuilderSettings(BaseModel):
    """Knobs for type inference and default-value normalization.

    Attributes:
        enum_name_suffix: Appended to the PascalCase table/column name of a synthesized enum.
        current_timestamp_functions: Function names whose defaults have no static literal
            and are dropped from date/time columns.
        strict_boolean_defaults: Raise on a boolean default outside 0/1 instead of
            dropping it.
    """

    enum_name_suffix: str = DEFAULT_ENUM_NAME_SUFFIX
    current_timestamp_functions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CURRENT_TIMESTAMP_FUNCTIONS)
    )
    strict_boolean_defaults: bool = True

    model_config = {"frozen": True}

    @field_validator("current_timestamp_functions")
    @classmethod
    def _lowercase_functions(cls, value: List[str]) -> List[str]:
        return [name.strip().lower() for name in value if name.strip()]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BuilderSettings":
        """Load settings from ``SQLBEANS_<FIELD>`` variables.

        Unset or blank variables keep their defaults.

        Raises:
            ValueError: If ``SQLBEANS_STRICT_BOOLEAN_DEFAULTS`` is not a boolean word.
        """
        environ = os.environ if environ is None else environ
        suffix = environ.get(ENV_PREFIX + "ENUM_NAME_SUFFIX", "").strip()
        return cls(
            enum_name_suffix=suffix or DEFAULT_ENUM_NAME_SUFFIX,
            current_timestamp_functions=_names(
                environ, "current_timestamp_functions", DEFAULT_CURRENT_TIMESTAMP_FUNCTIONS
            ),
            strict_boolean_defaults=_flag(environ, "strict_boolean_defaults", True),
        )
