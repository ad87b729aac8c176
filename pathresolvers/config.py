"""Resolver configuration.

Values come from keyword arguments or ``PATHRESOLVERS_*`` environment
variables; no configuration files are read. Tuple-valued settings are given
as comma-separated lists in the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from functools import lru_cache
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pathresolvers.resolvers.log import DEFAULT_LOG_DIR_NAME
from pathresolvers.resolvers.temp import DEFAULT_TEMP_DIR_NAME
from pathresolvers.resolvers.vendor import DEFAULT_UNRELIABLE_PREFIXES, DEFAULT_VENDOR_DIR_NAME
from pathresolvers.resolvers.www import DEFAULT_FRONT_CONTROLLERS

ENV_PREFIX = "PATHRESOLVERS_"

_DirName = Annotated[str, Field(min_length=1)]


class PathsConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    www_dir: str | None = None
    temp_dir: str | None = None
    temp_dir_name: _DirName = DEFAULT_TEMP_DIR_NAME
    log_dir: str | None = None
    log_dir_name: _DirName = DEFAULT_LOG_DIR_NAME
    vendor_dir_name: _DirName = DEFAULT_VENDOR_DIR_NAME
    loader_module: str | None = None
    loader_levels: Annotated[int, Field(ge=1)] = 2
    unreliable_prefixes: tuple[str, ...] = DEFAULT_UNRELIABLE_PREFIXES
    front_controllers: tuple[str, ...] = DEFAULT_FRONT_CONTROLLERS
    cli: bool = True

    @field_validator("unreliable_prefixes", "front_controllers", mode="before")
    @classmethod
    def _split_csv(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value


def config_from_env(environ: Mapping[str, str] | None = None) -> PathsConfig:
    """Build a :class:`PathsConfig` from ``PATHRESOLVERS_<FIELD>`` variables.

    Empty variables are ignored. Invalid values raise ``pydantic.ValidationError``.
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for field in PathsConfig.model_fields:
        raw = env.get(ENV_PREFIX + field.upper())
        if raw:
            values[field] = raw
    return PathsConfig.model_validate(values)


@lru_cache(maxsize=1)
def load_config() -> PathsConfig:
    """Return the process-wide configuration read from the environment."""
    return config_from_env()
