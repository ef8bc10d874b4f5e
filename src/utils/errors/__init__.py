"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DeliveryError,
    InfrastructureError,
)

__all__ = [
    "DeliveryError",
    "InfrastructureError",
]
