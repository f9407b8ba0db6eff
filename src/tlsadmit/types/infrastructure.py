"""Typed cluster infrastructure status."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InfrastructureStatus:
    """Observed infrastructure facts the admission checks depend on."""

    api_server_internal_uri: str
