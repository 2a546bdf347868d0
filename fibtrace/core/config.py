"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        service_name: Service identity attached to every exported span.
        service_version: Service version attached to every exported span.
        environment: Static deployment label attached to every exported span.
        traces_path: File receiving exported spans. "-" writes to stdout.
        pretty_print: Indent exported spans for human reading.
        include_timestamps: Keep span start/end times in the export.
        log_level: Diagnostic logging level (DEBUG, INFO, WARNING, ERROR).
    """

    model_config = SettingsConfigDict(
        env_prefix="FIBTRACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = "fib"
    service_version: str = "v0.1.0"
    environment: str = "demo"
    traces_path: str = "traces.txt"
    pretty_print: bool = True
    include_timestamps: bool = False
    log_level: str = "WARNING"

    @property
    def traces_to_stdout(self) -> bool:
        """Return True when spans should be exported to standard output."""
        return self.traces_path == "-"


settings = Settings()
