"""
Financial analysis engine: loan amortization and lease schedules.
"""

__version__ = "0.1.0"
