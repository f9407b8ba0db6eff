"""Infrastructure lookup exceptions."""

from __future__ import annotations

from tlsadmit.exceptions.base import TlsAdmitError


class InfrastructureLookupError(TlsAdmitError, LookupError):
    """Raised when the cluster infrastructure status cannot be retrieved.

    This is a system failure, not a configuration complaint: callers should
    report it as a server error and never treat it as "no conflict".
    """
