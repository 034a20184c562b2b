"""
TinyRemap Shared Module
=======================

Common configuration, logging, and console utilities shared across
all TinyRemap tools.
"""

from shared.config import RemapConfig, get_config

__all__ = ["RemapConfig", "get_config"]
