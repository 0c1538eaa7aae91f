"""Core services for date resolution, settings, and logging."""

from .config import AppConfig, config_path, load_config, save_config
from .dates import (
    day_of_year,
    days_in_year,
    facts_for_date,
    resolve_date_facts,
    resolve_local_date,
    week_of_year,
    weeks_in_year,
)
from .logging_setup import configure_logging, get_logger

__all__ = [
    "AppConfig",
    "config_path",
    "configure_logging",
    "day_of_year",
    "days_in_year",
    "facts_for_date",
    "get_logger",
    "load_config",
    "resolve_date_facts",
    "resolve_local_date",
    "save_config",
    "week_of_year",
    "weeks_in_year",
]
