"""
mailerlite-cli configuration — TOML profiles with environment overrides.

Config file location (first match wins):
  1. ``path`` argument / ``--config`` option
  2. ``$MAILERLITE_CONFIG``
  3. ``~/.mailerlite/config.toml``

Layout::

    active_profile = "default"

    [profiles.default]
    api_token = "..."
    base_url = ""

    [logging]
    level = "INFO"
    file = ""

Environment overrides:
  MAILERLITE_API_TOKEN      token for the resolved profile
  MAILERLITE_API_BASE_URL   API base URL for every profile
  MAILERLITE_LOG_LEVEL      logging level
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from mailerlite_cli.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ProfileNotFoundError,
)

DEFAULT_PROFILE = "default"
DEFAULT_BASE_URL = "https://connect.mailerlite.com/api"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def config_dir() -> Path:
    return Path.home() / ".mailerlite"


def default_config_path() -> Path:
    env = os.environ.get("MAILERLITE_CONFIG")
    if env:
        return Path(env).expanduser()
    return config_dir() / "config.toml"


@dataclass
class Profile:
    name: str
    api_token: str = ""
    base_url: str = ""

    @property
    def api_base_url(self) -> str:
        return (self.base_url or DEFAULT_BASE_URL).rstrip("/")


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str = ""

    @property
    def log_path(self) -> Path:
        """Where the dashboard writes its log while it owns the terminal."""
        if self.file:
            return Path(self.file).expanduser()
        return config_dir() / "dashboard.log"


@dataclass
class MailerLiteConfig:
    active_profile: str = DEFAULT_PROFILE
    profiles: dict[str, Profile] = field(default_factory=dict)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def resolve_profile(self, name: str = "") -> Profile:
        """
        Return the profile to use for this invocation.

        An explicit ``name`` must exist.  Without one the active profile is
        used; if it is missing but ``MAILERLITE_API_TOKEN`` is set, an
        ad-hoc profile is synthesised so the CLI works with no config file.
        """
        wanted = name or self.active_profile or DEFAULT_PROFILE
        profile = self.profiles.get(wanted)
        env_token = os.environ.get("MAILERLITE_API_TOKEN", "")

        if profile is None:
            if name or not env_token:
                raise ProfileNotFoundError(f"Profile {wanted!r} not found in configuration")
            profile = Profile(name=wanted)

        if env_token:
            profile = Profile(name=profile.name, api_token=env_token, base_url=profile.base_url)
        env_base = os.environ.get("MAILERLITE_API_BASE_URL", "")
        if env_base:
            profile = Profile(name=profile.name, api_token=profile.api_token, base_url=env_base)

        if not profile.api_token:
            raise ConfigError(f"Profile {profile.name!r} has no api_token")
        return profile


def _parse_profiles(raw: object) -> dict[str, Profile]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("[profiles] must be a table")
    profiles: dict[str, Profile] = {}
    for name, body in raw.items():
        if not isinstance(body, dict):
            raise ConfigError(f"[profiles.{name}] must be a table")
        token = body.get("api_token", "")
        base_url = body.get("base_url", "")
        if not isinstance(token, str) or not isinstance(base_url, str):
            raise ConfigError(f"[profiles.{name}] api_token and base_url must be strings")
        profiles[name] = Profile(name=name, api_token=token, base_url=base_url)
    return profiles


def _parse_level(value: object, source: str) -> str:
    level = str(value).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid logging level {level!r} in {source}; expected one of {', '.join(LOG_LEVELS)}"
        )
    return level


def _parse_logging(raw: object) -> LoggingConfig:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("[logging] must be a table")
    level = _parse_level(raw.get("level", "INFO"), "[logging]")
    return LoggingConfig(level=level, file=str(raw.get("file", "")))


def _apply_env(cfg: MailerLiteConfig) -> MailerLiteConfig:
    env_level = os.environ.get("MAILERLITE_LOG_LEVEL")
    if env_level:
        cfg.logging.level = _parse_level(env_level, "MAILERLITE_LOG_LEVEL")
    return cfg


def load_config(path: Path | None = None, *, apply_env: bool = True) -> MailerLiteConfig:
    """
    Load and validate the configuration file.

    ``apply_env=False`` returns the file exactly as written, which is what
    ``save_config`` should write back.

    Raises:
        ConfigNotFoundError: the file does not exist.
        ConfigError: the file is not valid TOML or holds invalid values.
    """
    cfg_path = path or default_config_path()
    if not cfg_path.exists():
        raise ConfigNotFoundError(f"Config file not found: {cfg_path}")

    try:
        with cfg_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {cfg_path}: {exc}") from exc

    active = data.get("active_profile", DEFAULT_PROFILE)
    if not isinstance(active, str):
        raise ConfigError("active_profile must be a string")

    cfg = MailerLiteConfig(
        active_profile=active,
        profiles=_parse_profiles(data.get("profiles")),
        logging=_parse_logging(data.get("logging")),
    )
    return _apply_env(cfg) if apply_env else cfg


def load_config_or_default(path: Path | None = None, *, apply_env: bool = True) -> MailerLiteConfig:
    """Like :func:`load_config`, but a missing file yields an empty config."""
    try:
        return load_config(path, apply_env=apply_env)
    except ConfigNotFoundError:
        cfg = MailerLiteConfig()
        return _apply_env(cfg) if apply_env else cfg


def save_config(cfg: MailerLiteConfig, path: Path | None = None) -> Path:
    """Write ``cfg`` as TOML (mode 0600, it holds API tokens) and return the path."""
    cfg_path = path or default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, object] = {
        "active_profile": cfg.active_profile,
        "profiles": {
            name: {
                key: value
                for key, value in (("api_token", p.api_token), ("base_url", p.base_url))
                if value
            }
            for name, p in cfg.profiles.items()
        },
        "logging": {
            key: value
            for key, value in (("level", cfg.logging.level), ("file", cfg.logging.file))
            if value
        },
    }

    with cfg_path.open("wb") as f:
        tomli_w.dump(data, f)
    cfg_path.chmod(0o600)
    return cfg_path
