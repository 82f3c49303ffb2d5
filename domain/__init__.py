"""Opus E-model Domain Layer.

This package contains the core business logic organized by bounded contexts:
- codec_quality: E-model coefficients (Ie, Bpl) for Opus operating points
"""

from domain import codec_quality

__all__ = ["codec_quality"]
