"""Collect-all schema validation for APIServer documents."""

from __future__ import annotations

import logging
from pathlib import Path

import jsonschema

from tlsadmit.config.loader import parse_yaml, read_document_text
from tlsadmit.constants.schema import APISERVER_SCHEMA
from tlsadmit.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005
from tlsadmit.exceptions import ConfigError
from tlsadmit.exceptions.validation import ValidationError, invalid
from tlsadmit.fieldpath import FieldPath

logger = logging.getLogger(__name__)

_VALIDATOR = jsonschema.Draft202012Validator(APISERVER_SCHEMA)


def validate_apiserver_file(path: Path) -> list[ValidationError]:
    """Validate the shape of an APIServer YAML file and return all errors.

    Never raises; every problem is returned as a :class:`ValidationError`.
    Schema errors are ordered by their location in the document.
    """
    path_str = str(path)
    if not path.exists():
        return [invalid(CFG001, path_str, path_str, "file not found")]

    try:
        text = read_document_text(path)
    except ConfigError as exc:
        return [invalid(CFG005, path_str, path_str, str(exc))]

    try:
        raw = parse_yaml(text, path)
    except ConfigError as exc:
        return [invalid(CFG002, path_str, path_str, str(exc))]

    if not isinstance(raw, dict):
        return [invalid(CFG003, path_str, type(raw).__name__, "document must be a YAML mapping")]

    errors: list[ValidationError] = []
    for schema_error in sorted(_VALIDATOR.iter_errors(raw), key=_document_order):
        field = str(FieldPath(tuple(schema_error.absolute_path))) or path_str
        errors.append(invalid(CFG004, field, schema_error.instance, schema_error.message))
    if errors:
        logger.debug("%s failed schema validation with %d error(s)", path, len(errors))
    return errors


def _document_order(error: jsonschema.ValidationError) -> list[tuple[bool, str | int]]:
    # Compare list indices numerically so [2] sorts before [10].
    return [(isinstance(segment, int), segment) for segment in error.absolute_path]
