"""Document defaults and filenames."""

from __future__ import annotations

APISERVER_FILENAME: str = "apiserver.yaml"
INFRASTRUCTURE_FILENAME: str = "infrastructure.yaml"

APISERVER_KIND: str = "APIServer"
INFRASTRUCTURE_KIND: str = "Infrastructure"
CLUSTER_RESOURCE_NAME: str = "cluster"
