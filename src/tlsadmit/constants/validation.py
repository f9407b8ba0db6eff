"""Stable validation error codes and messages for admission checks."""

from __future__ import annotations

CFG001: str = "CFG001"  # document file not found
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # schema violation
CFG005: str = "CFG005"  # document file cannot be read

SNI001: str = "SNI001"  # serving cert name shadows the internal load balancer

TLS001: str = "TLS001"  # unknown profile type
TLS002: str = "TLS002"  # profile type set but its field is unset
TLS003: str = "TLS003"  # no supported cipher suite in custom profile
TLS004: str = "TLS004"  # profile field set but type is empty
TLS005: str = "TLS005"  # profile field set that does not match type

ALL_CFG_CODES: tuple[str, ...] = (CFG001, CFG002, CFG003, CFG004, CFG005)
ALL_CHECK_CODES: tuple[str, ...] = (SNI001, TLS001, TLS002, TLS003, TLS004, TLS005)

SNI_CONFLICT_FMT: str = "may not match internal loadbalancer: {hostname}"
TYPE_FIELD_UNSET_FMT: str = "type set to {type}, but the corresponding field is unset"
UNKNOWN_TYPE_FMT: str = "unknown type, valid values are: [{valid}]"
TYPE_EMPTY_MESSAGE: str = "one of the profiles is set, but the type field is empty"
FIELD_FORBIDDEN_FMT: str = "may not be set when type is {type}"
NO_SUPPORTED_CIPHER_MESSAGE: str = "no supported cipher suite found"
