"""Runtime configuration.

Values come from the environment and can be overridden per invocation
by the CLI's global options.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_APP_ID = "default-app-id"
DEFAULT_DATA_DIR = Path("data")

ENV_DATA_DIR = "STOREFRONT_DATA_DIR"
ENV_APP_ID = "STOREFRONT_APP_ID"
ENV_AUTH_TOKEN = "STOREFRONT_AUTH_TOKEN"


@dataclass(frozen=True)
class StorefrontConfig:
    data_dir: Path = DEFAULT_DATA_DIR
    app_id: str = DEFAULT_APP_ID
    auth_token: str | None = None  # anonymous sign-in when unset

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> StorefrontConfig:
        env = os.environ if environ is None else environ
        return StorefrontConfig(
            data_dir=Path(env.get(ENV_DATA_DIR) or DEFAULT_DATA_DIR),
            app_id=env.get(ENV_APP_ID) or DEFAULT_APP_ID,
            auth_token=env.get(ENV_AUTH_TOKEN) or None,
        )

    def with_overrides(
        self,
        data_dir: Path | None = None,
        app_id: str | None = None,
    ) -> StorefrontConfig:
        changes: dict = {}
        if data_dir is not None:
            changes["data_dir"] = Path(data_dir)
        if app_id:
            changes["app_id"] = app_id
        return replace(self, **changes) if changes else self
