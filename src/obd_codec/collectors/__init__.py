"""Collectors that drive an adapter through a transport."""

from .base import BaseCollector, Transport
from .adapter import AdapterInitializer
from .pid import SensorCollector
from .dtc import DTCCollector
from .vin import VINCollector

__all__ = [
    "BaseCollector",
    "Transport",
    "AdapterInitializer",
    "SensorCollector",
    "DTCCollector",
    "VINCollector",
]
