"""
Registry module - fixed in-memory profile records
"""
from .seed import PROFILE_RECORDS, load_profiles

__all__ = ["PROFILE_RECORDS", "load_profiles"]
