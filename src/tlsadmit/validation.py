"""Validation orchestrator.

Runs the TLS profile and SNI checks against one APIServer configuration and
concatenates their errors, so the CLI and embedding callers share one path.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tlsadmit.checks import validate_sni_names, validate_tls_security_profile
from tlsadmit.config import load_apiserver, validate_apiserver_file
from tlsadmit.exceptions.validation import ValidationError
from tlsadmit.fieldpath import FieldPath
from tlsadmit.infrastructure import InfrastructureGetter, YamlInfrastructureGetter
from tlsadmit.types.apiserver import APIServer

logger = logging.getLogger(__name__)


def validate_apiserver(apiserver: APIServer, infrastructure_getter: InfrastructureGetter) -> list[ValidationError]:
    """Return profile errors followed by SNI errors.

    Raises :class:`InfrastructureLookupError` if the SNI check cannot read the
    infrastructure status.
    """
    errors: list[ValidationError] = []
    profile_path = FieldPath.new("spec", "tlsSecurityProfile")
    errors.extend(validate_tls_security_profile(profile_path, apiserver.spec.tls_security_profile))
    errors.extend(validate_sni_names(apiserver, infrastructure_getter))
    return errors


def preflight_validate(config_path: Path, infrastructure_path: Path) -> list[ValidationError]:
    """Validate an APIServer file against the infrastructure described in another file.

    Schema errors stop validation before the semantic checks run.
    """
    errors = validate_apiserver_file(config_path)
    if errors:
        return errors

    apiserver = load_apiserver(config_path)
    errors = validate_apiserver(apiserver, YamlInfrastructureGetter(infrastructure_path))
    logger.debug("Validated %s: %d error(s)", config_path, len(errors))
    return errors
