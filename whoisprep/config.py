"""Configuration model and loaders for whoisprep command runs.

Responsibilities:
- Define run configuration as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `PrepareConfig`: normalized settings for one `prepare` command run.
- `ConfigLoader`: static construction helpers for `PrepareConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .dialects import supported_tlds


STDIN_PATH = Path("-")

_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def _clean_string(value: object) -> str | None:
    """Return `value` as a stripped string, or `None` when it is missing or blank."""

    text = "" if value is None else str(value).strip()
    return text or None


def _boolean_token(value: object) -> bool | None:
    """Read a `true`/`yes`/`1`/`on` style flag; `None` means unrecognized."""

    if isinstance(value, bool):
        return value
    token = (_clean_string(value) or "").lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


@dataclass(slots=True)
class PrepareConfig:
    """Settings for one preparation run.

    Attributes:
        input_path: Raw WHOIS response file, or `-` for standard input.
        output_path: Destination for canonical text; standard output when `None`.
        tld: Dialect override used instead of detection.
        report: Whether to print a dispatch summary after preparing.
        log_events: Whether to emit structured dispatch events on stderr.
    """

    input_path: Path
    output_path: Path | None = None
    tld: str | None = None
    report: bool = False
    log_events: bool = False

    def validate(self) -> None:
        """Validate configuration values before running."""

        if self.tld is not None:
            tld = self.tld.strip().lower()
            if tld not in supported_tlds():
                supported = ", ".join(supported_tlds())
                raise ValueError(
                    f"`tld` must name a supported dialect ({supported}); got `{self.tld}`."
                )
            self.tld = tld

    def with_overrides(self, **overrides: object) -> PrepareConfig:
        """Return a validated copy with non-`None` overrides applied."""

        applied = {key: value for key, value in overrides.items() if value is not None}
        config = replace(self, **applied)
        config.validate()
        return config


class ConfigLoader:
    """Factory methods for loading `PrepareConfig` objects."""

    _SUPPORTED_YAML_KEYS = frozenset({"input", "output", "tld", "report", "log_events"})
    _REQUIRED_YAML_KEYS = frozenset({"input"})

    @staticmethod
    def from_yaml(path: Path) -> PrepareConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> PrepareConfig:
        """Create a validated config from `WHOISPREP_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        input_path = ConfigLoader._optional_env_string(env_map, "WHOISPREP_INPUT")
        if input_path is None:
            raise ValueError("Environment variable `WHOISPREP_INPUT` is required.")
        output_path = ConfigLoader._optional_env_string(env_map, "WHOISPREP_OUTPUT")

        config = PrepareConfig(
            input_path=Path(input_path),
            output_path=Path(output_path) if output_path is not None else None,
            tld=ConfigLoader._optional_env_string(env_map, "WHOISPREP_TLD"),
            report=ConfigLoader._optional_env_boolean(env_map, "WHOISPREP_REPORT") or False,
            log_events=(
                ConfigLoader._optional_env_boolean(env_map, "WHOISPREP_LOG_EVENTS") or False
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> PrepareConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        input_path = _clean_string(payload.get("input"))
        if input_path is None:
            raise ValueError(f"{source_label} requires non-empty `input`.")
        output_path = _clean_string(payload.get("output"))

        config = PrepareConfig(
            input_path=Path(input_path),
            output_path=Path(output_path) if output_path is not None else None,
            tld=_clean_string(payload.get("tld")),
            report=ConfigLoader._optional_boolean(payload, "report", source_label, default=False),
            log_events=ConfigLoader._optional_boolean(
                payload, "log_events", source_label, default=False
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Validate supported and required YAML keys."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        missing = sorted(
            key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload
        )
        if missing:
            key_list = ", ".join(missing)
            raise ValueError(f"{source_label} is missing required key(s): {key_list}.")

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = _boolean_token(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return _clean_string(env.get(key))

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        parsed = _boolean_token(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
