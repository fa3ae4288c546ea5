import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptorium.core.exceptions import ConfigError

CONFIG_FILENAME = ".scriptorium.toml"


def _deep_merge(destination: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and key in destination and isinstance(destination[key], Mapping):
            destination[key] = _deep_merge(dict(destination[key]), dict(value))
        else:
            destination[key] = value
    return destination


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to the 'site_root' unless absolute.
    site_root defaults to current working directory.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )
    posts_dir: Path = Field(default=Path("posts"), description="Directory holding Markdown posts")
    output_dir: Path = Field(default=Path("docs"), description="Directory generated pages are written to")

    @property
    def abs_posts_dir(self) -> Path:
        return self._resolve(self.posts_dir)

    @property
    def abs_output_dir(self) -> Path:
        return self._resolve(self.output_dir)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class BlogSettings(BaseModel):
    """Which posts count as articles and how category pages are titled."""

    include_drafts: bool = Field(default=False, description="Include draft and archived posts")
    page_title: str = Field(default="Categories", description="Heading of the categories page")


class ScriptoriumConfig(BaseSettings):
    """Root configuration for Scriptorium.

    Supports environment variable overrides with the pattern:
    SCRIPTORIUM_SECTION__KEY (e.g., SCRIPTORIUM_BLOG__INCLUDE_DRAFTS)
    """

    paths: PathsSettings = Field(default_factory=PathsSettings)
    blog: BlogSettings = Field(default_factory=BlogSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="SCRIPTORIUM_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> "ScriptoriumConfig":
        """Loads configuration from .scriptorium.toml and environment variables.

        Priority (highest to lowest):
        1. Environment variables (SCRIPTORIUM_SECTION__KEY)
        2. Config file (.scriptorium.toml in site_root)
        3. Defaults

        Raises:
            ConfigError: If the config file is not valid TOML or a setting has
                an invalid value.
        """
        root_path = site_root if site_root is not None else Path.cwd()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(str(config_file), str(exc)) from exc

        try:
            env_settings = cls().model_dump(exclude_unset=True)
        except ValidationError as exc:
            raise ConfigError("SCRIPTORIUM_* environment variables", str(exc)) from exc

        merged_config = _deep_merge(file_settings, env_settings)
        paths = merged_config.setdefault("paths", {})
        if not isinstance(paths, dict):
            msg = f"'paths' must be a table, got {type(paths).__name__}"
            raise ConfigError(str(config_file), msg)
        paths["site_root"] = root_path

        try:
            return cls.model_validate(merged_config)
        except ValidationError as exc:
            raise ConfigError(str(config_file), str(exc)) from exc
