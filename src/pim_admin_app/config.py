from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEMO_EMAIL = "admin@test.com"
DEMO_PASSWORD = "Admin123!"
CLOCK_FORMAT = "%Y-%m-%d %H:%M:%S"


class AppConfigError(ValueError):
    """Raised when admin app configuration values are invalid."""


@dataclass(frozen=True)
class AppConfig:
    demo_email: str = DEMO_EMAIL
    demo_password: str = DEMO_PASSWORD
    clock_interval_seconds: float = 1.0
    clock_format: str = CLOCK_FORMAT
    max_workers: int = 4


def load_app_config(env_file: str | None = None) -> AppConfig:
    load_dotenv(env_file)

    raw_interval = os.getenv("PIM_CLOCK_INTERVAL_SECONDS", "1")
    try:
        clock_interval = float(raw_interval)
    except ValueError as exc:
        raise AppConfigError(f"Invalid PIM_CLOCK_INTERVAL_SECONDS: {raw_interval!r}") from exc
    if clock_interval <= 0:
        raise AppConfigError(f"Invalid PIM_CLOCK_INTERVAL_SECONDS: expected > 0, got {clock_interval}")

    raw_workers = os.getenv("PIM_MAX_WORKERS", "4")
    try:
        max_workers = int(raw_workers)
    except ValueError as exc:
        raise AppConfigError(f"Invalid PIM_MAX_WORKERS: {raw_workers!r}") from exc
    if max_workers < 1:
        raise AppConfigError(f"Invalid PIM_MAX_WORKERS: expected >= 1, got {max_workers}")

    return AppConfig(
        demo_email=os.getenv("PIM_DEMO_EMAIL", DEMO_EMAIL),
        demo_password=os.getenv("PIM_DEMO_PASSWORD", DEMO_PASSWORD),
        clock_interval_seconds=clock_interval,
        max_workers=max_workers,
    )
