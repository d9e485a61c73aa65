"""Application ports package."""

from .codec import FieldCodecPort
from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort
from .rates import RatesSourcePort, RatesStorePort

__all__ = [
    "FieldCodecPort",
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "RatesSourcePort",
    "RatesStorePort",
]
