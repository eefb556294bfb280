"""
Environment variable utilities for reliable configuration handling.

This module provides consistent environment variable parsing across the package.
"""
import os
from typing import Optional


def env_optional_str(name: str) -> Optional[str]:
    """Get environment variable as string, treating blank values as unset."""
    v = os.getenv(name)
    if v is None or not v.strip():
        return None
    return v.strip()
