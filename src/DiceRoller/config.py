"""Settings loader for DiceRoller."""

from pathlib import Path
from typing import Any

import tomllib
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PRESETS = ["1d4", "1d6", "1d8", "1d10", "1d12", "1d20", "1d100", "2d6+3"]


def _toml_settings_source() -> dict[str, Any]:
    """Load settings from config.toml with keys mapped to Settings fields.

    This source has LOWER priority than env/.env so those can override TOML.
    """
    cfg_path = Path("config.toml")
    if not cfg_path.exists():
        return {}
    with cfg_path.open("rb") as f:
        t = tomllib.load(f)
    log_cfg = t.get("logging", {}) or {}
    dice_cfg = t.get("dice", {}) or {}
    out: dict[str, Any] = {
        "env": t.get("app", {}).get("env", "dev"),
        "logging_level": log_cfg.get("level", "INFO"),
        "logging_file_path": log_cfg.get("file_path", "logs/diceroller.jsonl"),
        "logging_max_bytes": log_cfg.get("max_bytes", 5_000_000),
        "logging_backup_count": log_cfg.get("backup_count", 5),
    }

    # Per-handler levels: strings INFO|DEBUG|WARNING|ERROR|CRITICAL|NONE,
    # or bools where True means "use the overall level".
    overall = str(out["logging_level"]).upper()

    def _norm_level(v, default):
        if isinstance(v, str):
            return v.upper()
        if isinstance(v, bool):
            return default if v else "NONE"
        return default

    out["logging_console"] = _norm_level(log_cfg.get("console"), overall)
    file_val = log_cfg.get("to_file")
    out["logging_file"] = "NONE" if file_val is None else _norm_level(file_val, overall)

    if dice_cfg.get("presets") is not None:
        out["dice_presets"] = list(dice_cfg["presets"])

    return out


class Settings(BaseSettings):
    env: str = Field(default="dev")

    # --- Logging ---
    logging_level: str = "INFO"
    logging_console: str = "INFO"
    # File logging is opt-in for a library; the CLI rarely wants a log dir.
    logging_file: str = "NONE"
    logging_file_path: str = "logs/diceroller.jsonl"
    logging_max_bytes: int = 5_000_000
    logging_backup_count: int = 5

    # --- Dice ---
    dice_presets: list[str] = Field(default_factory=lambda: list(DEFAULT_PRESETS))

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Precedence (highest to lowest):
        # 1) init_settings (explicit overrides in code/tests)
        # 2) dotenv (.env in cwd)
        # 3) env_settings (OS env)
        # 4) TOML (config.toml in cwd)
        # 5) file_secret_settings
        return (
            init_settings,
            dotenv_settings,
            env_settings,
            _toml_settings_source,
            file_secret_settings,
        )


def load_settings() -> Settings:
    return Settings()
