"""
Evaluation engine configuration settings.

Defaults applied when a request configuration leaves an option out.

Dependencies: pydantic_settings
System role: Engine defaults
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class EngineSettings(BaseSettings):
    """Defaults for EvaluationEngine requests."""

    default_chunker: str = Field(
        default="sentence",
        description="Chunker used when a request does not name one",
    )
    stage_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout applied to each embedding/storage call (None = unbounded)",
    )

    class Config:
        """Pydantic config for environment variable loading."""

        env_prefix = "ENGINE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
