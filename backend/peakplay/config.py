"""Application configuration from environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment."""
    
    # Database
    database_url: str = "sqlite:///./peakplay.db"
    
    # Frontend
    frontend_url: str = "http://localhost:3000"
    
    # Scoring defaults
    default_nutrition_goal: str = "maintaining"
    default_activity_level: str = "moderate"
    tactical_placeholder_score: int = 65
    
    # Progress tracking
    default_history_days: int = 30
    
    # Logging
    log_dir: str = "logs"
    
    # App settings
    app_name: str = "PeakPlay Scoring"
    debug: bool = True
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
