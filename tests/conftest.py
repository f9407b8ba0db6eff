"""Shared pytest fixtures for tlsadmit tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tlsadmit.infrastructure import StaticInfrastructureGetter
from tlsadmit.types.infrastructure import InfrastructureStatus

INTERNAL_NAME: str = "internal.host.com"


@pytest.fixture
def infrastructure_getter() -> StaticInfrastructureGetter:
    """Return a getter reporting ``internal.host.com`` as the internal load balancer."""
    return StaticInfrastructureGetter(InfrastructureStatus(api_server_internal_uri=INTERNAL_NAME))


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing YAML content to a file under ``tmp_path``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
