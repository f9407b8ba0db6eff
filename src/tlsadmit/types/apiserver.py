"""Typed APIServer configuration structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from tlsadmit.constants.config import CLUSTER_RESOURCE_NAME
from tlsadmit.types.tls import TLSSecurityProfile


@dataclass(frozen=True)
class NamedCertificate:
    """A serving certificate bound to explicit SNI hostname patterns."""

    names: tuple[str, ...] = ()
    serving_certificate: str = ""


@dataclass(frozen=True)
class ServingCerts:
    """Serving certificate overrides."""

    named_certificates: tuple[NamedCertificate, ...] = ()


@dataclass(frozen=True)
class APIServerSpec:
    """Administrator-controlled API server settings relevant to TLS."""

    serving_certs: ServingCerts = field(default_factory=ServingCerts)
    tls_security_profile: TLSSecurityProfile | None = None


@dataclass(frozen=True)
class APIServer:
    """Cluster-scoped API server configuration document."""

    name: str = CLUSTER_RESOURCE_NAME
    spec: APIServerSpec = field(default_factory=APIServerSpec)
