"""Data models for pipeline results."""

from pydantic import BaseModel, Field


class StageResult(BaseModel):
    """Base class for stage results with timing."""

    elapsed_time: float = Field(0.0, ge=0)


class GenerationResult(StageResult):
    """Output from a complete generation run."""

    words_processed: int = Field(0, ge=0)
    variants_emitted: int = Field(0, ge=0)
    failed_words: int = Field(0, ge=0)
