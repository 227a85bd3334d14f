"""
Utility modules for the storefront data layer
"""
from .ids import IdGenerator, isoformat, utc_now

__all__ = [
    'IdGenerator',
    'isoformat',
    'utc_now',
]
