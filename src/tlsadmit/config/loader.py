"""Loading of APIServer and Infrastructure YAML documents."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from tlsadmit.constants.config import APISERVER_KIND, CLUSTER_RESOURCE_NAME, INFRASTRUCTURE_KIND
from tlsadmit.constants.tls import VERSION_TLS12
from tlsadmit.exceptions import ConfigError
from tlsadmit.types.apiserver import APIServer, APIServerSpec, NamedCertificate, ServingCerts
from tlsadmit.types.infrastructure import InfrastructureStatus
from tlsadmit.types.tls import (
    CustomTLSProfile,
    IntermediateTLSProfile,
    ModernTLSProfile,
    OldTLSProfile,
    TLSProfileSpec,
    TLSSecurityProfile,
)


def load_apiserver(path: Path) -> APIServer:
    """Load an ``APIServer`` document from ``path``."""
    raw = _read_document(path, APISERVER_KIND)
    metadata = _ensure_mapping(raw.get("metadata"), "metadata")
    spec = _ensure_mapping(raw.get("spec"), "spec")
    serving = _ensure_mapping(spec.get("servingCerts"), "spec.servingCerts")

    named_raw = serving.get("namedCertificates") or []
    if not isinstance(named_raw, list):
        raise ConfigError("spec.servingCerts.namedCertificates must be a list")

    named_certificates = []
    for index, entry in enumerate(named_raw):
        key = f"spec.servingCerts.namedCertificates[{index}]"
        entry = _ensure_mapping(entry, key)
        secret = _ensure_mapping(entry.get("servingCertificate"), f"{key}.servingCertificate")
        named_certificates.append(
            NamedCertificate(
                names=tuple(_ensure_string_list(entry.get("names"), f"{key}.names")),
                serving_certificate=str(secret.get("name", "")),
            )
        )

    profile_raw = spec.get("tlsSecurityProfile")
    return APIServer(
        name=str(metadata.get("name", CLUSTER_RESOURCE_NAME)),
        spec=APIServerSpec(
            serving_certs=ServingCerts(named_certificates=tuple(named_certificates)),
            tls_security_profile=None if profile_raw is None else build_tls_profile(profile_raw),
        ),
    )


def build_tls_profile(raw: Any) -> TLSSecurityProfile:
    """Build a :class:`TLSSecurityProfile` from its YAML mapping."""
    raw = _ensure_mapping(raw, "spec.tlsSecurityProfile")
    profile_type = raw.get("type") or ""
    if not isinstance(profile_type, str):
        raise ConfigError("spec.tlsSecurityProfile.type must be a string")

    custom = None
    if raw.get("custom") is not None:
        custom_raw = _ensure_mapping(raw["custom"], "spec.tlsSecurityProfile.custom")
        custom = CustomTLSProfile(
            spec=TLSProfileSpec(
                ciphers=tuple(_ensure_string_list(custom_raw.get("ciphers"), "spec.tlsSecurityProfile.custom.ciphers")),
                min_tls_version=str(custom_raw.get("minTLSVersion") or VERSION_TLS12),
            )
        )

    return TLSSecurityProfile(
        type=profile_type,
        old=OldTLSProfile() if raw.get("old") is not None else None,
        intermediate=IntermediateTLSProfile() if raw.get("intermediate") is not None else None,
        modern=ModernTLSProfile() if raw.get("modern") is not None else None,
        custom=custom,
    )


def load_infrastructure(path: Path) -> InfrastructureStatus:
    """Load the status of an ``Infrastructure`` document from ``path``."""
    raw = _read_document(path, INFRASTRUCTURE_KIND)
    status = _ensure_mapping(raw.get("status"), "status")
    uri = status.get("apiServerInternalURI")
    if not isinstance(uri, str) or not uri.strip():
        raise ConfigError(f"{path}: status.apiServerInternalURI must be a non-empty string")
    return InfrastructureStatus(api_server_internal_uri=uri.strip())


def read_yaml(path: Path) -> Any:
    """Parse a YAML file, raising :class:`ConfigError` on read or parse failure."""
    return parse_yaml(read_document_text(path), path)


def read_document_text(path: Path) -> str:
    """Read a document, raising :class:`ConfigError` if it is missing or unreadable."""
    if not path.exists():
        raise ConfigError(f"file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc


def parse_yaml(text: str, path: Path) -> Any:
    """Parse YAML ``text`` read from ``path``."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc


def _read_document(path: Path, kind: str) -> dict[str, Any]:
    raw = read_yaml(path)
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a YAML mapping")
    found = raw.get("kind", kind)
    if found != kind:
        raise ConfigError(f"{path}: expected kind {kind}, got {found!r}")
    return raw


def _ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    """Coerce ``None`` to an empty mapping, raising ConfigError on other non-mappings."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
