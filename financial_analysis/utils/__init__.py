"""
Shared utilities.
"""

from financial_analysis.utils.stable_json import json_stable, stable_hash

__all__ = ["json_stable", "stable_hash"]
