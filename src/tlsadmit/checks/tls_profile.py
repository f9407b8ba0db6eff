"""TLS security profile consistency checks and profile resolution."""

from __future__ import annotations

from tlsadmit.ciphers import partition_ciphers
from tlsadmit.constants.tls import DEFAULT_PROFILE_TYPE, PRESET_PROFILES, PROFILE_TYPES
from tlsadmit.constants.validation import (
    FIELD_FORBIDDEN_FMT,
    NO_SUPPORTED_CIPHER_MESSAGE,
    TLS001,
    TLS002,
    TLS003,
    TLS004,
    TLS005,
    TYPE_EMPTY_MESSAGE,
    TYPE_FIELD_UNSET_FMT,
    UNKNOWN_TYPE_FMT,
)
from tlsadmit.exceptions import ConfigError
from tlsadmit.exceptions.validation import ValidationError, forbidden, invalid, required
from tlsadmit.fieldpath import FieldPath
from tlsadmit.types.tls import ResolvedTLSProfile, TLSProfileSpec, TLSProfileType, TLSSecurityProfile

# Profile type -> name of the sub-structure that must accompany it.
_TYPE_FIELDS: dict[TLSProfileType, str] = {
    TLSProfileType.OLD: "old",
    TLSProfileType.INTERMEDIATE: "intermediate",
    TLSProfileType.MODERN: "modern",
    TLSProfileType.CUSTOM: "custom",
}


def validate_tls_security_profile(
    field_path: FieldPath,
    profile: TLSSecurityProfile | None,
) -> list[ValidationError]:
    """Validate a TLS security profile rooted at ``field_path``.

    A missing profile is valid: the platform default applies.
    """
    errors: list[ValidationError] = []
    if profile is None:
        return errors

    errors.extend(validate_tls_security_profile_type(field_path, profile))

    if profile.type == TLSProfileType.CUSTOM and profile.custom is not None and profile.custom.spec.ciphers:
        errors.extend(validate_cipher_suites(field_path.child("custom", "ciphers"), profile.custom.spec.ciphers))
    return errors


def validate_tls_security_profile_type(field_path: FieldPath, profile: TLSSecurityProfile) -> list[ValidationError]:
    """Check that ``type`` is known and that only its sub-structure is set."""
    errors: list[ValidationError] = []
    if not profile.type:
        if profile.populated_fields():
            errors.append(required(TLS004, field_path.child("type"), TYPE_EMPTY_MESSAGE))
        return errors

    if profile.type not in PROFILE_TYPES:
        errors.append(
            invalid(
                TLS001,
                field_path.child("type"),
                profile.type,
                UNKNOWN_TYPE_FMT.format(valid=" ".join(PROFILE_TYPES)),
            )
        )
        return errors

    field_name = _TYPE_FIELDS[TLSProfileType(profile.type)]
    if getattr(profile, field_name) is None:
        errors.append(required(TLS002, field_path.child(field_name), TYPE_FIELD_UNSET_FMT.format(type=profile.type)))
        return errors

    for other in profile.populated_fields():
        if other != field_name:
            errors.append(forbidden(TLS005, field_path.child(other), FIELD_FORBIDDEN_FMT.format(type=profile.type)))
    return errors


def validate_cipher_suites(field_path: FieldPath, ciphers: tuple[str, ...]) -> list[ValidationError]:
    """Require at least one recognized cipher; unknown extras are tolerated."""
    errors: list[ValidationError] = []
    recognized, _ = partition_ciphers(ciphers)
    if not recognized:
        errors.append(invalid(TLS003, field_path, list(ciphers), NO_SUPPORTED_CIPHER_MESSAGE))
    return errors


def resolve_tls_profile(profile: TLSSecurityProfile | None) -> ResolvedTLSProfile:
    """Reduce a profile to its single active variant and effective settings.

    An absent or empty profile resolves to the platform default. Raises
    :class:`ConfigError` for any profile the validator rejects, so a profile
    resolves exactly when it validates.
    """
    if profile is None or (not profile.type and not profile.populated_fields()):
        return _preset(TLSProfileType(DEFAULT_PROFILE_TYPE))

    errors = validate_tls_security_profile(FieldPath.new("tlsSecurityProfile"), profile)
    if errors:
        raise ConfigError("; ".join(e.format() for e in errors))

    profile_type = TLSProfileType(profile.type)
    if profile_type is TLSProfileType.CUSTOM and profile.custom is not None:
        return ResolvedTLSProfile(type=profile_type, spec=profile.custom.spec)
    return _preset(profile_type)


def _preset(profile_type: TLSProfileType) -> ResolvedTLSProfile:
    ciphers, min_tls_version = PRESET_PROFILES[profile_type]
    return ResolvedTLSProfile(type=profile_type, spec=TLSProfileSpec(ciphers=ciphers, min_tls_version=min_tls_version))
