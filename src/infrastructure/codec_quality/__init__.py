"""Infrastructure adapters for the codec quality bounded context.

This module provides the infrastructure layer implementation of the
coefficient repository: the published Opus E-model table held in memory.
"""

from .static_store import OPUS_COEFFICIENTS, StaticCoefficientStore, freeze_table

__all__ = ["OPUS_COEFFICIENTS", "StaticCoefficientStore", "freeze_table"]
