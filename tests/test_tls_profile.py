"""Tests for TLS security profile validation and resolution."""

from __future__ import annotations

import pytest

from tlsadmit.checks import resolve_tls_profile, validate_tls_security_profile
from tlsadmit.constants.tls import PRESET_PROFILES, VERSION_TLS12, VERSION_TLS13
from tlsadmit.constants.validation import TLS001, TLS002, TLS003, TLS004, TLS005
from tlsadmit.exceptions import ConfigError
from tlsadmit.exceptions.validation import ErrorType
from tlsadmit.fieldpath import FieldPath
from tlsadmit.types.tls import (
    CustomTLSProfile,
    IntermediateTLSProfile,
    ModernTLSProfile,
    OldTLSProfile,
    TLSProfileSpec,
    TLSProfileType,
    TLSSecurityProfile,
)

ROOT = FieldPath.new("testSpec")


def _custom(*ciphers: str, min_tls_version: str = VERSION_TLS12) -> TLSSecurityProfile:
    return TLSSecurityProfile(
        type="Custom",
        custom=CustomTLSProfile(spec=TLSProfileSpec(ciphers=ciphers, min_tls_version=min_tls_version)),
    )


@pytest.mark.parametrize(
    "profile",
    [
        pytest.param(None, id="nil-profile"),
        pytest.param(TLSSecurityProfile(), id="empty-profile"),
        pytest.param(TLSSecurityProfile(type="Old", old=OldTLSProfile()), id="old"),
        pytest.param(TLSSecurityProfile(type="Intermediate", intermediate=IntermediateTLSProfile()), id="intermediate"),
        pytest.param(TLSSecurityProfile(type="Modern", modern=ModernTLSProfile()), id="modern"),
        pytest.param(_custom("UNKNOWN_CIPHER", "TLS_CHACHA20_POLY1305_SHA256"), id="unknown-plus-tls13-cipher"),
        pytest.param(_custom("UNKNOWN_CIPHER", "ECDHE-ECDSA-CHACHA20-POLY1305"), id="unknown-plus-tls12-cipher"),
        pytest.param(_custom(), id="no-ciphers-in-custom"),
    ],
)
def test_valid_profiles_return_no_errors(profile: TLSSecurityProfile | None) -> None:
    assert validate_tls_security_profile(ROOT, profile) == []


def test_type_does_not_match_set_field() -> None:
    profile = TLSSecurityProfile(type="Intermediate", modern=ModernTLSProfile())

    errors = validate_tls_security_profile(ROOT, profile)

    assert len(errors) == 1
    assert errors[0].code == TLS002
    assert errors[0].type is ErrorType.REQUIRED
    assert errors[0].format() == (
        "testSpec.intermediate: Required value: type set to Intermediate, but the corresponding field is unset"
    )


@pytest.mark.parametrize(
    ("profile_type", "field"),
    [
        pytest.param("Old", "old", id="old"),
        pytest.param("Modern", "modern", id="modern"),
        pytest.param("Custom", "custom", id="custom"),
    ],
)
def test_type_without_field_reports_expected_field(profile_type: str, field: str) -> None:
    errors = validate_tls_security_profile(ROOT, TLSSecurityProfile(type=profile_type))

    assert [e.field for e in errors] == [f"testSpec.{field}"]
    assert errors[0].detail == f"type set to {profile_type}, but the corresponding field is unset"


def test_unknown_type() -> None:
    errors = validate_tls_security_profile(ROOT, TLSSecurityProfile(type="something"))

    assert len(errors) == 1
    assert errors[0].code == TLS001
    assert errors[0].format() == (
        'testSpec.type: Invalid value: "something": unknown type, valid values are: [Old Intermediate Modern Custom]'
    )


def test_unknown_type_reported_even_with_fields_set() -> None:
    profile = TLSSecurityProfile(type="modern", modern=ModernTLSProfile())

    errors = validate_tls_security_profile(ROOT, profile)

    assert [e.code for e in errors] == [TLS001]


def test_unknown_cipher() -> None:
    errors = validate_tls_security_profile(ROOT, _custom("UNKNOWN_CIPHER"))

    assert len(errors) == 1
    assert errors[0].code == TLS003
    assert errors[0].value == ["UNKNOWN_CIPHER"]
    assert errors[0].format() == (
        'testSpec.custom.ciphers: Invalid value: ["UNKNOWN_CIPHER"]: no supported cipher suite found'
    )


def test_unknown_cipher_error_carries_full_list() -> None:
    errors = validate_tls_security_profile(ROOT, _custom("NOPE-1", "NOPE-2"))

    assert errors[0].value == ["NOPE-1", "NOPE-2"]


def test_field_set_with_empty_type() -> None:
    errors = validate_tls_security_profile(ROOT, TLSSecurityProfile(modern=ModernTLSProfile()))

    assert [(e.code, e.field) for e in errors] == [(TLS004, "testSpec.type")]


def test_stray_custom_with_preset_type_is_forbidden_without_cipher_check() -> None:
    profile = TLSSecurityProfile(
        type="Modern",
        modern=ModernTLSProfile(),
        custom=CustomTLSProfile(spec=TLSProfileSpec(ciphers=("UNKNOWN_CIPHER",))),
    )

    errors = validate_tls_security_profile(ROOT, profile)

    assert [(e.code, e.type, e.field) for e in errors] == [(TLS005, ErrorType.FORBIDDEN, "testSpec.custom")]
    assert errors[0].format() == "testSpec.custom: Forbidden: may not be set when type is Modern"


def test_every_extra_populated_field_is_reported() -> None:
    profile = TLSSecurityProfile(
        type="Modern",
        old=OldTLSProfile(),
        intermediate=IntermediateTLSProfile(),
        modern=ModernTLSProfile(),
    )

    errors = validate_tls_security_profile(ROOT, profile)

    assert [(e.code, e.field) for e in errors] == [(TLS005, "testSpec.old"), (TLS005, "testSpec.intermediate")]


def test_missing_expected_field_hides_extra_fields() -> None:
    profile = TLSSecurityProfile(type="Intermediate", modern=ModernTLSProfile(), old=OldTLSProfile())

    errors = validate_tls_security_profile(ROOT, profile)

    assert [(e.code, e.field) for e in errors] == [(TLS002, "testSpec.intermediate")]


@pytest.mark.parametrize(
    "profile",
    [
        pytest.param(None, id="nil-profile"),
        pytest.param(TLSSecurityProfile(), id="empty-profile"),
        pytest.param(TLSSecurityProfile(type="Old", old=OldTLSProfile()), id="old"),
        pytest.param(TLSSecurityProfile(type="Modern", modern=ModernTLSProfile(), old=OldTLSProfile()), id="extra-old"),
        pytest.param(TLSSecurityProfile(type="Intermediate", modern=ModernTLSProfile()), id="mismatch"),
        pytest.param(TLSSecurityProfile(type="something"), id="unknown-type"),
        pytest.param(TLSSecurityProfile(modern=ModernTLSProfile()), id="missing-type"),
        pytest.param(_custom("UNKNOWN_CIPHER"), id="unknown-cipher"),
        pytest.param(_custom("UNKNOWN_CIPHER", "AES128-SHA"), id="one-known-cipher"),
    ],
)
def test_resolve_succeeds_exactly_when_validation_passes(profile: TLSSecurityProfile | None) -> None:
    valid = validate_tls_security_profile(ROOT, profile) == []

    try:
        resolve_tls_profile(profile)
    except ConfigError:
        resolved = False
    else:
        resolved = True

    assert resolved is valid


def test_validation_is_idempotent() -> None:
    profile = _custom("UNKNOWN_CIPHER")

    assert validate_tls_security_profile(ROOT, profile) == validate_tls_security_profile(ROOT, profile)


def test_resolve_defaults_to_intermediate() -> None:
    resolved = resolve_tls_profile(None)

    assert resolved.type is TLSProfileType.INTERMEDIATE
    assert resolved.spec.ciphers == PRESET_PROFILES["Intermediate"][0]
    assert resolved.spec.min_tls_version == VERSION_TLS12
    assert resolve_tls_profile(TLSSecurityProfile()) == resolved


def test_resolve_modern_preset() -> None:
    resolved = resolve_tls_profile(TLSSecurityProfile(type="Modern", modern=ModernTLSProfile()))

    assert resolved.type is TLSProfileType.MODERN
    assert resolved.spec.min_tls_version == VERSION_TLS13


def test_resolve_custom_uses_supplied_spec() -> None:
    profile = _custom("ECDHE-RSA-AES128-GCM-SHA256", min_tls_version=VERSION_TLS13)

    resolved = resolve_tls_profile(profile)

    assert resolved.type is TLSProfileType.CUSTOM
    assert resolved.spec == TLSProfileSpec(ciphers=("ECDHE-RSA-AES128-GCM-SHA256",), min_tls_version=VERSION_TLS13)


@pytest.mark.parametrize(
    "profile",
    [
        pytest.param(TLSSecurityProfile(type="something"), id="unknown-type"),
        pytest.param(TLSSecurityProfile(type="Intermediate", modern=ModernTLSProfile()), id="mismatch"),
        pytest.param(
            TLSSecurityProfile(type="Modern", modern=ModernTLSProfile(), old=OldTLSProfile()),
            id="two-variants",
        ),
        pytest.param(TLSSecurityProfile(old=OldTLSProfile()), id="missing-type"),
    ],
)
def test_resolve_rejects_inconsistent_profiles(profile: TLSSecurityProfile) -> None:
    with pytest.raises(ConfigError):
        resolve_tls_profile(profile)
