"""Settings for one txnguard invocation.

Sources, highest first:

1. CLI flags (a flag can only switch its key on)
2. ``TXNGUARD_*`` env vars, ``__`` between section and key
   (``TXNGUARD_OUTPUT__JSON=1``)
3. ``txnguard.toml``: ``--config``, else ``TXNGUARD_CONFIG``, else the first
   one found walking up from the working directory
4. Defaults in :mod:`txnguard.config.models`

Sources are merged per key, so ``--quiet`` on the command line keeps
``[output] json`` from the file.
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from txnguard.config.models import LoggingConfig, OutputConfig

CONFIG_FILENAME = "txnguard.toml"
CONFIG_ENV_VAR = "TXNGUARD_CONFIG"

# File read by the TOML source of the settings object being built.
_toml_file: ContextVar[Path | None] = ContextVar("txnguard_toml_file", default=None)


def find_config(start: Path | None = None) -> Path | None:
    """Return the ``txnguard.toml`` that applies to *start* (default: cwd).

    ``TXNGUARD_CONFIG`` wins when set; if it names a missing file no
    config is used at all.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TxnGuardSettings(BaseSettings):
    """Resolved, frozen settings.

    Attributes:
        config_path: The TOML file that was read, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TXNGUARD_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        json_output: bool = False,
        quiet: bool = False,
        verbose: bool = False,
        log_json: bool = False,
    ) -> TxnGuardSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that is not a file is ignored.

        Raises:
            click.ClickException: The TOML is malformed, or a source sets an
                unknown key or a non-boolean value.
        """
        toml_path = Path(config_path) if config_path else find_config(start)
        if toml_path is not None and not toml_path.is_file():
            toml_path = None

        switched_on = {
            ("output", "json"): json_output,
            ("output", "quiet"): quiet,
            ("logging", "verbose"): verbose,
            ("logging", "json"): log_json,
        }
        overrides: dict[str, dict[str, bool]] = {}
        for (section, key), on in switched_on.items():
            if on:
                overrides.setdefault(section, {})[key] = True

        token = _toml_file.set(toml_path)
        try:
            return cls(config_path=toml_path, **overrides)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        except ValidationError as exc:
            where = toml_path or "environment"
            msg = f"Invalid settings ({where}): {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_file.reset(token)
