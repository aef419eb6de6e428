"""Settings loader with sensible defaults."""

from __future__ import annotations

from pathlib import Path
import tomllib

from pydantic import BaseModel, Field

from core.ranges import DEFAULT_RANGES, RangePolicy, normalize_token, validate_table


class RangeSettings(BaseModel):
    window: int
    width: int
    smoothing: int = 7

    def policy(self) -> RangePolicy:
        return RangePolicy(self.window, self.width, self.smoothing)


class BlockTimeSettings(BaseModel):
    capacity: int = 100


class LoggingSettings(BaseModel):
    level: str = "INFO"
    file: str | None = None


def _default_ranges() -> dict[str, RangeSettings]:
    return {k: RangeSettings(**p._asdict()) for k, p in DEFAULT_RANGES.items()}


class Settings(BaseModel):
    ranges: dict[str, RangeSettings] = Field(default_factory=_default_ranges)
    block_time: BlockTimeSettings = BlockTimeSettings()
    logging: LoggingSettings = LoggingSettings()

    def range_table(self) -> dict[str, RangePolicy]:
        """Return the range table keyed by normalized token."""
        table = {normalize_token(k): v.policy() for k, v in self.ranges.items()}
        validate_table(table)
        return table


_SETTINGS_FILE = Path(__file__).resolve().parent.parent / "settings.toml"


def load_settings(path: Path | str | None = None) -> Settings:
    """Parse ``settings.toml``; missing file -> defaults.

    Ranges given in the file are merged over the built-in table.
    """
    path = Path(path) if path is not None else _SETTINGS_FILE
    if not path.exists():
        return Settings()
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise RuntimeError(f"Failed to parse {path}: {exc}") from exc
    ranges = _default_ranges()
    for token, data in raw.pop("ranges", {}).items():
        ranges[normalize_token(token)] = RangeSettings(**data)
    loaded = Settings(**raw, ranges=ranges)
    loaded.range_table()
    return loaded


settings = load_settings()
