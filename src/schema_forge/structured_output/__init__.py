"""Structured-output normalization exports."""

from .structured_output_normalizer import prepare_for_structured_output

__all__ = ["prepare_for_structured_output"]
