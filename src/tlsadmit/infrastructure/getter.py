"""Infrastructure status getters.

A getter is any zero-argument callable returning the current
:class:`InfrastructureStatus`. Getters are invoked once per validation and
never cache, so a changed status is picked up on the next call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias
from pathlib import Path
from urllib.parse import urlsplit

from tlsadmit.config.loader import load_infrastructure
from tlsadmit.exceptions import ConfigError, InfrastructureLookupError
from tlsadmit.types.infrastructure import InfrastructureStatus

logger = logging.getLogger(__name__)

InfrastructureGetter: TypeAlias = Callable[[], InfrastructureStatus]


class StaticInfrastructureGetter:
    """Return a fixed status; useful for embedding and tests."""

    def __init__(self, status: InfrastructureStatus) -> None:
        self._status = status

    def __call__(self) -> InfrastructureStatus:
        return self._status


class YamlInfrastructureGetter:
    """Read the status from an ``Infrastructure`` YAML document on every call."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def __call__(self) -> InfrastructureStatus:
        logger.debug("Reading infrastructure status from %s", self._path)
        try:
            return load_infrastructure(self._path)
        except ConfigError as exc:
            raise InfrastructureLookupError(f"cannot read infrastructure status: {exc}") from exc


def internal_hostname(status: InfrastructureStatus) -> str:
    """Return the reserved internal load balancer hostname.

    URL-form values (``https://api-int.example.com:6443``) are reduced to their
    host, keeping its case as written; anything else is returned verbatim.
    """
    uri = status.api_server_internal_uri
    if "://" in uri:
        host = urlsplit(uri).netloc.rpartition("@")[2]
        if host.startswith("["):
            host = host[1 : host.find("]")] if "]" in host else host
        else:
            host = host.partition(":")[0]
        if host:
            return host
    return uri
