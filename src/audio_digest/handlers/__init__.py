"""Handler exports."""

from .pipeline_handler import PipelineHandler

__all__ = ["PipelineHandler"]
