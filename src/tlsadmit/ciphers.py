"""Cipher catalog lookups."""

from __future__ import annotations

from collections.abc import Iterable

from tlsadmit.constants.tls import TLS12_CIPHERS, TLS13_CIPHERS


def is_supported_cipher(name: str) -> bool:
    """Return True when ``name`` is a recognized TLS 1.2-class or TLS 1.3 suite."""
    return name in TLS13_CIPHERS or name in TLS12_CIPHERS


def partition_ciphers(names: Iterable[str]) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split cipher names into ``(recognized, unrecognized)``, keeping input order."""
    recognized: list[str] = []
    unrecognized: list[str] = []
    for name in names:
        (recognized if is_supported_cipher(name) else unrecognized).append(name)
    return tuple(recognized), tuple(unrecognized)


def openssl_to_iana(names: Iterable[str]) -> tuple[str, ...]:
    """Convert OpenSSL-style cipher names to IANA names, dropping unknown ones."""
    converted: list[str] = []
    for name in names:
        iana = TLS13_CIPHERS.get(name) or TLS12_CIPHERS.get(name)
        if iana is not None:
            converted.append(iana)
    return tuple(converted)
