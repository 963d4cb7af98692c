from __future__ import annotations

import os
from datetime import time
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import PydanticBaseSettingsSource, YamlConfigSettingsSource

from adapters.layout.day_column import LayoutConfig

DEFAULT_CONFIG_PATH = Path("config/layout.yaml")


class LayoutSettings(BaseModel):
    day_start: time = time.min
    day_end: time = time.max
    step: int = Field(default=30, gt=0)
    timeslots: int = Field(default=2, gt=0)
    minimum_start_difference: float | None = Field(default=None, ge=0)
    indent_output: bool = True

    @field_validator("minimum_start_difference", mode="before")
    @classmethod
    def blank_tolerance_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def ensure_day_window(self) -> LayoutSettings:
        if self.day_end <= self.day_start:
            msg = "layout.day_end must be after layout.day_start"
            raise ValueError(msg)
        return self

    def to_layout_config(self) -> LayoutConfig:
        return LayoutConfig(
            day_start=self.day_start,
            day_end=self.day_end,
            step=self.step,
            timeslots=self.timeslots,
            minimum_start_difference=self.minimum_start_difference,
        )


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DAYVIEW_", env_nested_delimiter="__")

    layout: LayoutSettings = LayoutSettings()

    _yaml_path: ClassVar[Path | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        ]
        if cls._yaml_path:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=cls._yaml_path))
        return tuple(sources)


def load_settings(config_path: Path | None = None) -> AppSettings:
    env_path = os.getenv("DAYVIEW_CONFIG_PATH")
    resolved_path: Path | None = None

    if config_path is not None:
        resolved_path = config_path
    elif env_path:
        resolved_path = Path(env_path)
    elif DEFAULT_CONFIG_PATH.exists():
        resolved_path = DEFAULT_CONFIG_PATH

    previous = AppSettings._yaml_path
    try:
        if resolved_path is not None:
            if not resolved_path.exists():
                msg = f"Config file not found: {resolved_path}"
                raise FileNotFoundError(msg)
            AppSettings._yaml_path = resolved_path
        return AppSettings()
    finally:
        AppSettings._yaml_path = previous
