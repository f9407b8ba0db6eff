"""Serving certificate SNI conflict checks."""

from __future__ import annotations

import json
import logging

from tlsadmit.constants.validation import SNI001, SNI_CONFLICT_FMT
from tlsadmit.exceptions import InfrastructureLookupError
from tlsadmit.exceptions.validation import ValidationError, invalid
from tlsadmit.fieldpath import FieldPath
from tlsadmit.infrastructure import InfrastructureGetter, internal_hostname
from tlsadmit.types.apiserver import APIServer
from tlsadmit.types.infrastructure import InfrastructureStatus

logger = logging.getLogger(__name__)

WILDCARD: str = "*"
WILDCARD_SUFFIX: str = ".*"


def name_matches_hostname(pattern: str, hostname: str) -> bool:
    """Return True if an SNI ``pattern`` would capture ``hostname``.

    Only exact names and a single trailing wildcard label (``prefix.*``, or a
    bare ``*`` with an empty prefix) are understood. Leading wildcards such as
    ``*.example.com`` match literally.
    """
    if pattern == hostname:
        return True
    if pattern == WILDCARD or pattern.endswith(WILDCARD_SUFFIX):
        return hostname.startswith(pattern[:-1])
    return False


def validate_sni_names(apiserver: APIServer, infrastructure_getter: InfrastructureGetter) -> list[ValidationError]:
    """Reject serving certificate names that shadow the internal load balancer.

    Raises :class:`InfrastructureLookupError` when the infrastructure status
    cannot be read, whatever the getter raised. The check never passes
    without a successful lookup.
    """
    errors: list[ValidationError] = []
    named_certificates = apiserver.spec.serving_certs.named_certificates
    if not named_certificates:
        return errors

    try:
        status = infrastructure_getter()
    except InfrastructureLookupError:
        raise
    except Exception as exc:
        raise InfrastructureLookupError(f"cannot read infrastructure status: {exc}") from exc
    if not isinstance(status, InfrastructureStatus):
        raise InfrastructureLookupError(f"infrastructure getter returned {type(status).__name__}, not a status")
    hostname = internal_hostname(status)
    logger.debug("Checking %d named certificate(s) against %s", len(named_certificates), hostname)

    certs_path = FieldPath.new("spec", "servingCerts")
    detail = SNI_CONFLICT_FMT.format(hostname=json.dumps(hostname))
    for cert_index, cert in enumerate(named_certificates):
        for name_index, name in enumerate(cert.names):
            if not name_matches_hostname(name, hostname):
                continue
            path = certs_path.index(cert_index).child("names").index(name_index)
            logger.debug("SNI name %r at %s conflicts with %s", name, path, hostname)
            errors.append(invalid(SNI001, path, name, detail))
    return errors
