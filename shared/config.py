import json
import os
from dataclasses import dataclass
from typing import Optional

CONNECTION_SETTING = "CosmosDBConnection"
DATABASE_SETTING = "CosmosDbName"
CONTAINER_SETTING = "CosmosDbCollectionName"


class ConfigurationError(RuntimeError):
    """Raised when a required app setting is missing."""


def _load_config() -> dict:
    try:
        return json.load(open("config.json"))
    except Exception:
        return {}


@dataclass(frozen=True)
class Settings:
    cosmos_connection: Optional[str] = None
    cosmos_database: Optional[str] = None
    cosmos_container: Optional[str] = None

    def require_cosmos(self) -> "Settings":
        missing = [
            name
            for name, value in (
                (CONNECTION_SETTING, self.cosmos_connection),
                (DATABASE_SETTING, self.cosmos_database),
                (CONTAINER_SETTING, self.cosmos_container),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError("Missing app settings: " + ", ".join(missing))
        return self


def load_settings() -> Settings:
    """Read settings from the environment, falling back to config.json.

    On Azure the values come from the app settings (locally from
    local.settings.json), which the host exposes as environment variables.
    """
    cosmos_cfg = _load_config().get("cosmos", {})
    return Settings(
        cosmos_connection=os.environ.get(CONNECTION_SETTING) or cosmos_cfg.get("connection_string"),
        cosmos_database=os.environ.get(DATABASE_SETTING) or cosmos_cfg.get("database"),
        cosmos_container=os.environ.get(CONTAINER_SETTING) or cosmos_cfg.get("container"),
    )
