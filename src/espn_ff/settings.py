from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os

from dotenv import load_dotenv

from espn_ff.errors import ConfigurationError


DEFAULT_BASE_URL = "https://games.espn.com/ffl/api/v2/"
DEFAULT_TIMEOUT = 30


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    base_url: str
    timeout: int
    log_level: str

    env_path: Path

    league_id: Optional[int] = None
    season_id: Optional[int] = None

    @staticmethod
    def from_local_config() -> "Settings":
        """
        Loads config/local/.env by default (gitignored).
        You can override with environment variables.
        """
        repo_root = Path(__file__).resolve().parents[2]  # .../src/espn_ff -> repo root
        default_env_path = repo_root / "config" / "local" / ".env"

        # Environment variables already set will not be overwritten.
        if default_env_path.exists():
            load_dotenv(default_env_path, override=False)

        env_path = Path(os.getenv("ESPN_FF_ENV_PATH", str(default_env_path))).expanduser().resolve()

        if env_path.exists():
            load_dotenv(env_path, override=False)

        base_url = os.getenv("ESPN_FF_BASE_URL", "").strip() or DEFAULT_BASE_URL
        log_level = (os.getenv("ESPN_FF_LOG_LEVEL", "").strip() or "INFO").upper()

        timeout = _int_env("ESPN_FF_TIMEOUT", DEFAULT_TIMEOUT)
        if timeout is None or timeout <= 0:
            raise ConfigurationError(f"ESPN_FF_TIMEOUT must be positive, got {timeout}")

        return Settings(
            base_url=base_url,
            timeout=timeout,
            log_level=log_level,
            env_path=env_path,
            league_id=_int_env("ESPN_FF_LEAGUE_ID", None),
            season_id=_int_env("ESPN_FF_SEASON_ID", None),
        )

    def require_league(self) -> tuple[int, int]:
        missing = [k for k, v in {
            "ESPN_FF_LEAGUE_ID": self.league_id,
            "ESPN_FF_SEASON_ID": self.season_id,
        }.items() if v is None]

        if missing:
            raise ConfigurationError(
                "Missing required settings: "
                + ", ".join(missing)
                + ". Check config/local/.env (gitignored)."
            )
        return self.league_id, self.season_id
