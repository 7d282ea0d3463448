"""
Stress Service Package

Stress lookup collaborators for the transcription engine: the online
slovored.com accent dictionary and an offline LMDB dictionary.

Usage:
    from src.bg_nlp.stress_service import OnlineStressService

    with OnlineStressService() as service:
        service.lookup("череша")  # "черѐша"
"""

from .types import StressEntryDict, StressLookup, StressLookupError
from .stress_service import OnlineStressService
from .lmdb_dictionary import LMDBStressDictionary, LMDBStressDictionaryExporter, read_accented_words

__all__ = [
    "LMDBStressDictionary",
    "LMDBStressDictionaryExporter",
    "OnlineStressService",
    "StressEntryDict",
    "StressLookup",
    "StressLookupError",
    "read_accented_words",
]
