"""Settings read from environment variables."""

import logging
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Where the walkthrough reads its data and puts its charts."""

    events_csv: str = "pbp_events.csv"
    results_csv: str = "game_results.csv"
    # no chart directory means charts are shown on screen
    chart_dir: Optional[str] = None
    season: str = "2023-24"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            events_csv=os.environ.get("PBP_EVENTS_CSV", cls.events_csv),
            results_csv=os.environ.get("PBP_RESULTS_CSV", cls.results_csv),
            chart_dir=os.environ.get("PBP_CHART_DIR") or None,
            season=os.environ.get("PBP_SEASON", cls.season),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level),
        )

    def log_level_number(self) -> int:
        """Numeric logging level for log_level, e.g. 20 for "info"."""
        # getLevelName maps known names to ints and anything else to "Level X"
        level = logging.getLevelName(self.log_level.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown LOG_LEVEL {self.log_level!r}, expected DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level

    def setup_logging(self) -> None:
        """Send log records to stderr at the configured level."""
        logging.basicConfig(
            level=self.log_level_number(),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
