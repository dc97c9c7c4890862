"""App-specific settings, a free-form key/value map stored with the app."""

from typing import Any, Mapping

from paraclient.client.base import BaseClient


class AppSettingsMixin(BaseClient):
    def app_settings(self, key: str | None = None) -> dict[str, Any]:
        """All settings, or ``{"value": ...}`` for a single key."""
        path = f"_settings/{key}" if key else "_settings"
        return self._json_dict(self.invoke_get(path))

    def add_app_setting(self, key: str | None, value: Any) -> None:
        """Add or overwrite one setting."""
        if key and value is not None:
            self.invoke_put(f"_settings/{key}", {"value": value})

    def set_app_settings(self, settings: Mapping[str, Any] | None) -> None:
        """Overwrite all settings."""
        if settings is not None:
            self.invoke_put("_settings", dict(settings))

    def remove_app_setting(self, key: str | None) -> None:
        if key:
            self.invoke_delete(f"_settings/{key}")
