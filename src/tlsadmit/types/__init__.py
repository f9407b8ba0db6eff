"""Shared typed structures for tlsadmit."""

from .apiserver import APIServer, APIServerSpec, NamedCertificate, ServingCerts
from .infrastructure import InfrastructureStatus
from .tls import (
    CustomTLSProfile,
    IntermediateTLSProfile,
    ModernTLSProfile,
    OldTLSProfile,
    ResolvedTLSProfile,
    TLSProfileSpec,
    TLSProfileType,
    TLSSecurityProfile,
)

__all__ = [
    "APIServer",
    "APIServerSpec",
    "CustomTLSProfile",
    "InfrastructureStatus",
    "IntermediateTLSProfile",
    "ModernTLSProfile",
    "NamedCertificate",
    "OldTLSProfile",
    "ResolvedTLSProfile",
    "ServingCerts",
    "TLSProfileSpec",
    "TLSProfileType",
    "TLSSecurityProfile",
]
