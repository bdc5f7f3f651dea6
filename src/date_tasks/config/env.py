"""Environment configuration for date-tasks.

Settings are read from ``DATE_TASKS_*`` environment variables, or from a
``.env`` file in the working directory when one is present:

```bash
export DATE_TASKS_DEFAULT_TIMEZONE="Europe/London"
export DATE_TASKS_NEGATIVE_SPAN=absolute
```

and are exposed through the frozen `AppConfig` model:

```python
from date_tasks.config import load_config
cfg = load_config()
print(cfg.tzinfo)
```
"""

from __future__ import annotations

from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration settings loaded from environment variables.

    All environment variables are prefixed with DATE_TASKS_ (e.g.,
    DATE_TASKS_DEFAULT_TIMEZONE).
    """

    default_timezone: str = Field(
        default="UTC",
        description="IANA timezone applied to naive datetimes and zone-less strings",
    )
    negative_span: Literal["error", "absolute"] = Field(
        default="error",
        description="How time spans whose end precedes their start are handled",
    )

    model_config = SettingsConfigDict(
        env_prefix="DATE_TASKS_",
        case_sensitive=False,
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("default_timezone", mode="before")
    @classmethod
    def _check_timezone(cls, v):
        name = str(v).strip()
        try:
            ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {name!r}") from exc
        return name

    @property
    def tzinfo(self) -> ZoneInfo:
        """The default timezone as a tzinfo object."""
        return ZoneInfo(self.default_timezone)


def load_config() -> AppConfig:
    """Load and validate configuration from the environment.

    • All variables are prefixed with DATE_TASKS_.
    • Missing values fall back to the documented defaults.
    """
    return AppConfig()
