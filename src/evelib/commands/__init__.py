"""
evelib Commands

Command implementations for the evelib CLI.
Each module handles one upstream API.
"""

from . import crest, evecentral, marketdata, xmlmap

__all__ = [
    "crest",
    "evecentral",
    "marketdata",
    "xmlmap",
]
