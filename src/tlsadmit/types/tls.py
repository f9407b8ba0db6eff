"""Typed TLS security profile structures."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from tlsadmit.constants.tls import (
    PROFILE_CUSTOM,
    PROFILE_INTERMEDIATE,
    PROFILE_MODERN,
    PROFILE_OLD,
    VERSION_TLS12,
)


class TLSProfileType(enum.StrEnum):
    """Known profile kinds, in the order they are reported to users."""

    OLD = PROFILE_OLD
    INTERMEDIATE = PROFILE_INTERMEDIATE
    MODERN = PROFILE_MODERN
    CUSTOM = PROFILE_CUSTOM


@dataclass(frozen=True)
class TLSProfileSpec:
    """Cipher names (OpenSSL spelling) and the minimum protocol version."""

    ciphers: tuple[str, ...] = ()
    min_tls_version: str = VERSION_TLS12


@dataclass(frozen=True)
class OldTLSProfile:
    """Marker for the predefined Old profile."""


@dataclass(frozen=True)
class IntermediateTLSProfile:
    """Marker for the predefined Intermediate profile."""


@dataclass(frozen=True)
class ModernTLSProfile:
    """Marker for the predefined Modern profile."""


@dataclass(frozen=True)
class CustomTLSProfile:
    """User-supplied cipher list and minimum version."""

    spec: TLSProfileSpec = field(default_factory=TLSProfileSpec)


@dataclass(frozen=True)
class TLSSecurityProfile:
    """Profile as written by an administrator.

    ``type`` is a plain string so that unknown tags survive loading and can be
    reported. At most one of the sub-structures is expected to be set, and it
    must match ``type``.
    """

    type: str = ""
    old: OldTLSProfile | None = None
    intermediate: IntermediateTLSProfile | None = None
    modern: ModernTLSProfile | None = None
    custom: CustomTLSProfile | None = None

    def populated_fields(self) -> tuple[str, ...]:
        """Return the names of the sub-structures that are set."""
        candidates = (
            ("old", self.old),
            ("intermediate", self.intermediate),
            ("modern", self.modern),
            ("custom", self.custom),
        )
        return tuple(name for name, value in candidates if value is not None)


@dataclass(frozen=True)
class ResolvedTLSProfile:
    """A profile reduced to its single active variant and effective settings."""

    type: TLSProfileType
    spec: TLSProfileSpec
