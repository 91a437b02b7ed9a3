from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_log_dir

load_dotenv()

APP_NAME = "Church Agenda"
APP_AUTHOR = "ChurchAgenda"


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.anon_key:
            missing.append("SUPABASE_ANON_KEY")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    events_table: str
    reservations_table: str
    holidays_table: str
    venues_table: str
    participants_table: str


@dataclass(frozen=True)
class CalendarSettings:
    timezone: str


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int


@dataclass(frozen=True)
class AppSettings:
    supabase: SupabaseSettings
    storage: StorageSettings
    calendar: CalendarSettings
    logging: LoggingSettings
    server: ServerSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
    )

    storage = StorageSettings(
        events_table=os.getenv("AGENDA_EVENTS_TABLE", "eventos_agenda"),
        reservations_table=os.getenv("AGENDA_RESERVATIONS_TABLE", "reservas_espacos"),
        holidays_table=os.getenv("AGENDA_HOLIDAYS_TABLE", "feriados"),
        venues_table=os.getenv("AGENDA_VENUES_TABLE", "espacos_fisicos"),
        participants_table=os.getenv("AGENDA_PARTICIPANTS_TABLE", "evento_participantes"),
    )

    calendar = CalendarSettings(
        timezone=os.getenv("AGENDA_TIMEZONE", "America/Sao_Paulo"),
    )

    logging = LoggingSettings(
        level=os.getenv("AGENDA_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("AGENDA_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    server = ServerSettings(
        host=os.getenv("AGENDA_API_HOST", "127.0.0.1"),
        port=_int_from_env("AGENDA_API_PORT", 8000),
    )

    return AppSettings(
        supabase=supabase,
        storage=storage,
        calendar=calendar,
        logging=logging,
        server=server,
    )
