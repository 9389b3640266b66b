"""
Central configuration for the fantasy scraper
Based on Pydantic Settings with environment variable support
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, overridable via FANTASY_* environment variables"""

    # Source site
    base_url: str = "https://www.analiticafantasy.com/jugadores"
    market_base_url: str = (
        "https://www.analiticafantasy.com/jugadores/subidas-mercado-la-liga-fantasy"
    )
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
    )
    accept_language: str = "es-ES,es;q=0.9,en;q=0.8"

    # Fetching
    request_timeout: int = 30
    max_retries: int = 3
    retry_delay_range_min: float = 1.0
    retry_delay_range_max: float = 3.0
    max_concurrent_players: int = 4
    proxy_url: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    service_name: str = "fantasy-scraper"

    model_config = {
        "env_prefix": "FANTASY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def retry_delay_range(self) -> tuple[float, float]:
        low = min(self.retry_delay_range_min, self.retry_delay_range_max)
        high = max(self.retry_delay_range_min, self.retry_delay_range_max)
        return low, high


# Global Settings Instance
settings = Settings()
