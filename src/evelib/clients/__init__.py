"""
evelib Clients

One client per upstream API. Every operation has a blocking form and an
_async form backed by the same coroutine.
"""

from evelib.clients.crest import CrestMode, EveCrest
from evelib.clients.evecentral import EveCentral, EveCentralOptions
from evelib.clients.marketdata import EveMarketData, EveMarketDataOptions
from evelib.clients.xmlapi import Map

__all__ = [
    "CrestMode",
    "EveCentral",
    "EveCentralOptions",
    "EveCrest",
    "EveMarketData",
    "EveMarketDataOptions",
    "Map",
]
