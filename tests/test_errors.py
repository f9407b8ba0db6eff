"""Tests for the validation error model and field paths."""

from __future__ import annotations

from tlsadmit.constants.validation import ALL_CFG_CODES, ALL_CHECK_CODES
from tlsadmit.exceptions.validation import ErrorType, ValidationError, format_errors, invalid, required
from tlsadmit.fieldpath import FieldPath


def test_field_path_renders_children_and_indexes() -> None:
    path = FieldPath.new("spec", "servingCerts").index(1).child("names").index(0)

    assert str(path) == "spec.servingCerts[1].names[0]"


def test_field_path_is_immutable() -> None:
    root = FieldPath.new("spec")
    root.child("tlsSecurityProfile")

    assert str(root) == "spec"
    assert str(root.child("custom", "ciphers")) == "spec.custom.ciphers"


def test_empty_field_path_renders_empty() -> None:
    assert str(FieldPath()) == ""


def test_invalid_error_format_quotes_value() -> None:
    err = invalid("SNI001", FieldPath.new("spec"), "a.b", "bad name")

    assert err.type is ErrorType.INVALID
    assert err.format() == 'spec: Invalid value: "a.b": bad name'


def test_required_error_format_omits_value() -> None:
    err = required("TLS002", FieldPath.new("spec", "old"), "missing")

    assert err.value is None
    assert err.format() == "spec.old: Required value: missing"


def test_tuple_values_render_as_lists() -> None:
    err = ValidationError(code="TLS003", type=ErrorType.INVALID, field="x", detail="d", value=("A", "B"))

    assert err.format() == 'x: Invalid value: ["A", "B"]: d'


def test_format_errors_preserves_order() -> None:
    errs = [
        invalid("TLS001", "b", "v", "second code first"),
        invalid("SNI001", "a", "v", "first code second"),
    ]

    lines = format_errors(errs).split("\n")

    assert lines[0].startswith("[TLS001] b:")
    assert lines[1].startswith("[SNI001] a:")


def test_error_codes_are_unique() -> None:
    codes = ALL_CFG_CODES + ALL_CHECK_CODES

    assert len(set(codes)) == len(codes)
