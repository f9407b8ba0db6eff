"""Access to cluster infrastructure status for admission checks."""

from __future__ import annotations

from tlsadmit.infrastructure.getter import (
    InfrastructureGetter,
    StaticInfrastructureGetter,
    YamlInfrastructureGetter,
    internal_hostname,
)

__all__ = [
    "InfrastructureGetter",
    "StaticInfrastructureGetter",
    "YamlInfrastructureGetter",
    "internal_hostname",
]
