"""
utils/ - Shared Helpers
=======================
Logging setup and console input/formatting helpers used by every layer.
"""
