"""Configuration manager: TOML profile storage and connection resolution."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from parcel_client.client.errors import ConfigurationError
from parcel_client.config.constants import (
    CONFIG_FILE,
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    ENV_API_TOKEN,
    ENV_API_URL,
    ENV_PROFILE,
)
from parcel_client.config.models import ApiProfile, CLIConfig

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

# Profile values equal to these are left out of the file.
_PROFILE_DEFAULTS: dict[str, Any] = {
    "api_url": DEFAULT_API_URL,
    "verify_ssl": True,
    "timeout": DEFAULT_TIMEOUT,
}


def _profile_table(profile: ApiProfile) -> dict[str, Any]:
    table = profile.model_dump(exclude={"name"}, exclude_none=True)
    return {k: v for k, v in table.items() if _PROFILE_DEFAULTS.get(k, object()) != v}


def _write_private(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` in one rename; the file is created mode 0600."""
    temp = path.with_name(path.name + ".tmp")
    fd = os.open(temp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(text)
    temp.replace(path)


class ConfigManager:
    """Reads and writes the profile file and resolves the connection to use.

    The file is loaded lazily on first access to :attr:`config`; every
    mutating method writes it back immediately.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.is_file():
            return CLIConfig()
        try:
            data = tomllib.loads(self.config_path.read_text(encoding="utf-8"))
            profiles = {
                name: ApiProfile(name=name, **table)
                for name, table in data.get("profiles", {}).items()
            }
        except (tomllib.TOMLDecodeError, ValueError) as exc:
            raise ConfigurationError(
                f"Invalid profile in {self.config_path}: {exc}"
            ) from exc
        return CLIConfig(default_profile=data.get("default_profile"), profiles=profiles)

    def save(self) -> None:
        cfg = self.config
        document: dict[str, Any] = {}
        if cfg.default_profile:
            document["default_profile"] = cfg.default_profile
        if cfg.profiles:
            document["profiles"] = {
                name: _profile_table(profile) for name, profile in cfg.profiles.items()
            }
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        # Profiles hold API tokens: keep the directory owner-only.
        os.chmod(self.config_path.parent, 0o700)
        _write_private(self.config_path, tomli_w.dumps(document))

    def add_profile(self, profile: ApiProfile) -> None:
        """Store ``profile``; the first profile ever added becomes the default."""
        cfg = self.config
        cfg.profiles[profile.name] = profile
        cfg.default_profile = cfg.default_profile or profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        cfg = self.config
        if cfg.profiles.pop(name, None) is None:
            return False
        if cfg.default_profile == name:
            cfg.default_profile = next(iter(cfg.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> ApiProfile | None:
        """Look up ``name``, or the default profile when no name is given."""
        key = name or self.config.default_profile
        return self.config.profiles.get(key) if key else None

    def resolve_profile(
        self,
        profile_name: str | None = None,
        api_url: str | None = None,
        token: str | None = None,
    ) -> ApiProfile:
        """Work out the connection settings for one client.

        Explicit arguments win over ``PARCEL_API_URL`` / ``PARCEL_API_TOKEN``,
        which win over the profile (named, from ``PARCEL_PROFILE``, or the
        default), which wins over built-in defaults. A named profile that does
        not exist, or ending up without a token, is a :class:`ConfigurationError`.
        """
        wanted = profile_name or os.environ.get(ENV_PROFILE)
        base = self.get_profile(wanted)
        if wanted and base is None:
            raise ConfigurationError(f"Profile '{wanted}' not found in {self.config_path}.")
        if base is None:
            base = ApiProfile(name="cli")

        resolved_token = token or os.environ.get(ENV_API_TOKEN) or base.token
        if not resolved_token:
            raise ConfigurationError(
                "No API token configured. Use 'parcel config add' or set "
                f"{ENV_API_TOKEN} or pass --token."
            )
        try:
            return ApiProfile(**{
                **base.model_dump(),
                "api_url": api_url or os.environ.get(ENV_API_URL) or base.api_url,
                "token": resolved_token,
            })
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
