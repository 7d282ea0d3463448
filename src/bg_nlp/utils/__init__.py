"""
NLP Utils Package

Utilities for Bulgarian text handling.
"""

from .stress_marks import (
    add_stress_marks,
    encode_for_service,
    find_stress_marks,
    has_stress_mark,
    split_punctuation,
    strip_stress_marks,
    COMBINING_ACUTE,
    COMBINING_GRAVE,
    STRESS_MARKS,
)

__all__ = [
    'add_stress_marks',
    'encode_for_service',
    'find_stress_marks',
    'has_stress_mark',
    'split_punctuation',
    'strip_stress_marks',
    'COMBINING_ACUTE',
    'COMBINING_GRAVE',
    'STRESS_MARKS',
]

__version__ = '1.0.0'
