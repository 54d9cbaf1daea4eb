"""
WordShift Shared Module
========================

Configuration, logging and console helpers shared by every WordShift
command.
"""

from shared.config import WordShiftConfig, get_config

__all__ = ["WordShiftConfig", "get_config"]
