from __future__ import annotations

import re
from datetime import timedelta
from typing import Annotated

from pydantic import BaseModel
from pydantic.functional_validators import BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_timedelta_from_str(value):
    if not isinstance(value, str):
        return value

    msg = 'string in a valid format required (e.g. "1d6h30m15s", "2h30m", "250ms")'
    value = value.strip().lower()
    if re.fullmatch(r"\d+(?:\.\d+)?", value):
        return float(value)

    pattern = (
        r"((?P<days>\d+)d)?"
        r"((?P<hours>\d+)h)?"
        r"((?P<minutes>\d+)m(?!s))?"
        r"((?P<seconds>\d+)s)?"
        r"((?P<milliseconds>\d+)ms)?"
    )
    match = re.fullmatch(pattern, value)
    if not match:
        raise ValueError(msg)

    items = match.groupdict().items()
    kwargs = {key: int(value) for key, value in items if value}
    if not kwargs:
        raise ValueError(msg)

    try:
        return timedelta(**kwargs)
    except OverflowError:
        raise ValueError(msg) from None


Duration = Annotated[timedelta, BeforeValidator(_parse_timedelta_from_str)]


class WaitConfig(BaseModel):
    interval: Duration = timedelta(milliseconds=100)
    timeout: Duration = timedelta(0)


class AppConfig(BaseSettings):
    """Settings read from `TASKCHAIN_*` environment variables only."""

    wait: WaitConfig = WaitConfig()

    model_config = SettingsConfigDict(
        env_prefix="TASKCHAIN_",
        env_nested_delimiter="__",
        extra="ignore",
    )


config = AppConfig()
