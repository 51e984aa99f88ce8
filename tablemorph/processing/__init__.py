"""Processing pipeline for tablemorph."""

from tablemorph.processing.data_models import GenerationResult
from tablemorph.processing.pipeline import run_pipeline

__all__ = ["GenerationResult", "run_pipeline"]
