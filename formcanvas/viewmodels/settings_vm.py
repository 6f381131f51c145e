from __future__ import annotations

from dataclasses import asdict, replace
from typing import Any, Callable, Dict, Mapping, Optional

from ..domain.errors import InvalidPayloadError
from ..domain.settings import NAME_STRATEGIES, BuilderConfig
from ..domain.util import coerce_bool
from ..utils.logging import apply_preferences, env_requests_debug


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps builder settings UI state and validation, no I/O here."""

    def __init__(
        self,
        *,
        config: Optional[BuilderConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or BuilderConfig()
        self.on_save = on_save
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def id_prefix(self) -> str:
        return self.config.id_prefix

    @id_prefix.setter
    def id_prefix(self, value: str) -> None:
        self.config = replace(self.config, id_prefix=self._coerce_prefix(value))

    @property
    def name_strategy(self) -> str:
        return self.config.name_strategy

    @name_strategy.setter
    def name_strategy(self, value: str) -> None:
        self.config = replace(self.config, name_strategy=self._coerce_strategy(value))

    @property
    def seed_options(self) -> bool:
        return self.config.seed_options

    @seed_options.setter
    def seed_options(self, value: bool) -> None:
        self.config = replace(self.config, seed_options=coerce_bool(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat settings payload to the view-model."""

        if not isinstance(payload, Mapping):
            raise InvalidPayloadError("Settings payload must be a mapping of flat keys.")

        allowed_flat_keys = {*BuilderConfig.__dataclass_fields__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_flat_keys
        if unknown:
            raise InvalidPayloadError(
                f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}"
            )

        updates: Dict[str, Any] = {}
        for cfg_key in BuilderConfig.__dataclass_fields__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])

        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = coerce_bool(payload["debug_logging"])

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    def set_debug_logging(self, enabled: bool) -> int:
        """Store the preference and return the effective root log level."""
        self.debug_logging = coerce_bool(enabled)
        return apply_preferences(self.debug_logging)

    def cmd_save(self) -> None:
        if self.on_save:
            self.on_save(self.to_dict())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "id_prefix":
            return self._coerce_prefix(raw)
        if key == "name_strategy":
            return self._coerce_strategy(raw)
        if key == "seed_options":
            return coerce_bool(raw)
        if key in {"option_label_template", "option_value_template"}:
            return self._coerce_template(key, raw)
        raise InvalidPayloadError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_prefix(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise InvalidPayloadError("id_prefix must be a non-empty string.")
        return value.strip()

    @staticmethod
    def _coerce_strategy(value: Any) -> str:
        text = str(value or "").strip().lower()
        if text not in NAME_STRATEGIES:
            raise InvalidPayloadError(
                f"name_strategy must be one of: {', '.join(NAME_STRATEGIES)}."
            )
        return text

    @staticmethod
    def _coerce_template(name: str, value: Any) -> str:
        if not isinstance(value, str) or "{n}" not in value:
            raise InvalidPayloadError(f"{name} must be a string containing '{{n}}'.")
        return value


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return SettingsVM().to_dict()


__all__ = ["SettingsVM", "default_settings_payload"]
