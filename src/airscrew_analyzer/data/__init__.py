"""
Airscrew Analyzer Data Module
=============================

Contains sample airscrew descriptions and lookup functions.
"""

from .airscrew_database import (
    AIRSCREW_DATABASE,
    get_airscrew,
    list_airscrews,
    create_check_airscrew,
)

__all__ = [
    "AIRSCREW_DATABASE",
    "get_airscrew",
    "list_airscrews",
    "create_check_airscrew",
]
