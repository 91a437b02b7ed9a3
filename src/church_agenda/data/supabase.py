from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from supabase import Client, create_client

from ..config.settings import SupabaseSettings
from ..errors import DataFetchError

logger = logging.getLogger(__name__)


class SupabaseNotInitializedError(DataFetchError):
    """Raised when accessing the Supabase client without URL or key."""

    def __init__(self, missing: List[str]) -> None:
        self.missing = missing
        super().__init__("supabase", f"Supabase settings are missing: {', '.join(missing)}.")


@dataclass
class SupabaseGateway:
    """Thin wrapper around the Supabase Python client."""

    settings: SupabaseSettings
    _client: Optional[Client] = None

    def ensure_client(self) -> Client:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            raise SupabaseNotInitializedError(self.settings.missing_env_vars)
        self._client = create_client(self.settings.url, self.settings.anon_key)
        return self._client

    def table(self, name: str):
        return self.ensure_client().table(name)

    def run(self, query: Any, resource: str) -> List[dict]:
        """Execute a query builder, turning any failure into :class:`DataFetchError`."""

        try:
            response = query.execute()
        except Exception as exc:  # noqa: BLE001
            logger.error("Supabase query on %s failed: %s", resource, exc)
            raise DataFetchError(resource, f"Could not load {resource}: {exc}") from exc
        data = response.data
        if data is None:
            return []
        if isinstance(data, dict):
            return [data]
        return list(data)
