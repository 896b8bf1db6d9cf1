"""Configuration loaded from environment variables."""

import os
import re
from dataclasses import dataclass, field

from dotenv import load_dotenv

from morning.core.prompts import GREETING_PROMPT


# Discord
TOKEN_VAR = "GOOD_MORNING_DISCORD_TOKEN"
CHANNEL_VAR = "GOOD_MORNING_CHANNEL_ID"
MEMBERS_VAR = "GOOD_MORNING_MEMBERS"

WEATHER_FALLBACK = "не удалось получить данные о погоде"

_UINT64_MAX = 2**64 - 1
_DIGITS = re.compile(r"\d+")


class ConfigError(RuntimeError):
    """A required setting is missing."""


@dataclass(frozen=True)
class Settings:
    discord_token: str = ""
    channel_id: str = ""
    members_raw: str = ""
    recipients: tuple = field(default_factory=tuple)

    # LLM
    ollama_host: str = "http://localhost:11434"
    ollama_model: str = "llama3"
    serve_command: tuple = ("ollama", "serve")
    prompt_template: str = GREETING_PROMPT

    # Weather (Moscow)
    latitude: float = 55.7558
    longitude: float = 37.6173
    weather_fallback: str = WEATHER_FALLBACK

    # Schedule
    briefing_time: str = "12:00"

    def validate(self):
        """Raise ConfigError for the first required setting that is unset."""
        for var, value in (
            (TOKEN_VAR, self.discord_token),
            (CHANNEL_VAR, self.channel_id),
            (MEMBERS_VAR, self.members_raw),
        ):
            if not value:
                raise ConfigError(f"Failed to find {var}: environment variable not set")


def parse_members(raw):
    """Parse 'name,id,name,id' into an ordered list of (name, id) tuples.

    Tokens are taken two at a time. A pair whose id is not an unsigned 64-bit
    integer is dropped, as is a trailing name without an id.
    """
    tokens = raw.split(",")
    members = []
    for i in range(0, len(tokens) - 1, 2):
        name, id_str = tokens[i].strip(), tokens[i + 1].strip()
        if not _DIGITS.fullmatch(id_str):
            continue
        member_id = int(id_str)
        if member_id > _UINT64_MAX:
            continue
        members.append((name, member_id))
    return members


def load_settings(env=None, dotenv_path=None):
    """Build Settings once at startup. Loads .env unless an env mapping is given."""
    if env is None:
        load_dotenv(dotenv_path)
        env = os.environ

    defaults = Settings()
    members_raw = env.get(MEMBERS_VAR, "")
    serve_command = env.get("OLLAMA_SERVE_COMMAND", "")

    return Settings(
        discord_token=env.get(TOKEN_VAR, ""),
        channel_id=env.get(CHANNEL_VAR, ""),
        members_raw=members_raw,
        recipients=tuple(parse_members(members_raw)) if members_raw else (),
        ollama_host=env.get("OLLAMA_HOST", defaults.ollama_host),
        ollama_model=env.get("OLLAMA_MODEL", defaults.ollama_model),
        serve_command=tuple(serve_command.split()) if serve_command.strip() else defaults.serve_command,
        prompt_template=env.get("GOOD_MORNING_PROMPT", defaults.prompt_template),
        latitude=float(env.get("GOOD_MORNING_LATITUDE", defaults.latitude)),
        longitude=float(env.get("GOOD_MORNING_LONGITUDE", defaults.longitude)),
        weather_fallback=env.get("GOOD_MORNING_WEATHER_FALLBACK", defaults.weather_fallback),
        briefing_time=env.get("BRIEFING_TIME", defaults.briefing_time),
    )
