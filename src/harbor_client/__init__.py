"""Cliente Python para la API de gestión de Harbor (proyectos, repositorios, tags)."""

import logging

from harbor_client.adapters.query import encode_query
from harbor_client.client import Client, new_client
from harbor_client.core.config import BasicAuth, TransportSettings
from harbor_client.core.domain import (
    ComponentsOverview,
    ComponentsOverviewEntry,
    ImageScanOverview,
    ListOptions,
    ListProjectsOptions,
    ListRepositoriesOptions,
    Project,
    RawQuery,
    Repository,
    Signature,
    Tag,
    TagConfig,
    TagDetail,
)
from harbor_client.core.errors import (
    BodyReadError,
    DecodingError,
    EncodingError,
    HarborError,
    RequestConstructionError,
    TransportError,
    UnexpectedStatusError,
)

__all__ = [
    "BasicAuth",
    "BodyReadError",
    "Client",
    "ComponentsOverview",
    "ComponentsOverviewEntry",
    "DecodingError",
    "EncodingError",
    "HarborError",
    "ImageScanOverview",
    "ListOptions",
    "ListProjectsOptions",
    "ListRepositoriesOptions",
    "Project",
    "RawQuery",
    "Repository",
    "RequestConstructionError",
    "Signature",
    "Tag",
    "TagConfig",
    "TagDetail",
    "TransportError",
    "TransportSettings",
    "UnexpectedStatusError",
    "encode_query",
    "new_client",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
