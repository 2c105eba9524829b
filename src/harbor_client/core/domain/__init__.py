"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP: solo la forma de los recursos de Harbor.
"""

from harbor_client.core.domain.models import (
    ComponentsOverview,
    ComponentsOverviewEntry,
    ImageScanOverview,
    Project,
    Repository,
    Signature,
    Tag,
    TagConfig,
    TagDetail,
)
from harbor_client.core.domain.options import (
    ListOptions,
    ListProjectsOptions,
    ListRepositoriesOptions,
    RawQuery,
)

__all__ = [
    "ComponentsOverview",
    "ComponentsOverviewEntry",
    "ImageScanOverview",
    "ListOptions",
    "ListProjectsOptions",
    "ListRepositoriesOptions",
    "Project",
    "RawQuery",
    "Repository",
    "Signature",
    "Tag",
    "TagConfig",
    "TagDetail",
]
