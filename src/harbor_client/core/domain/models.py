"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Refleja la forma JSON que devuelve la API de Harbor con validación estricta.
- Los campos ausentes en el payload toman su valor vacío (0, "", {}, None),
  así el llamador nunca tiene que distinguir "ausente" de "vacío".

Nota:
- Estos modelos describen *qué* devuelve el servidor, no *cómo* se obtiene.
- Se crean frescos en cada llamada y pertenecen al llamador.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Base64Bytes, BaseModel, Field
from pydantic.config import ConfigDict


class HarborRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Project(HarborRecord):
    """Detalle de un proyecto."""

    project_id: int = Field(default=0, description="ID numérico del proyecto.")
    owner_id: int = Field(default=0)
    name: str = Field(default="")
    creation_time: datetime | None = Field(default=None)
    update_time: datetime | None = Field(default=None)
    deleted: Any = Field(
        default=None,
        description="Harbor lo ha servido como bool o como int según la versión.",
    )
    owner_name: str = Field(default="")
    togglable: bool = Field(default=False)
    role: int = Field(
        default=0,
        alias="current_user_role_id",
        description="Rol del usuario autenticado dentro del proyecto.",
    )
    repo_count: int = Field(default=0)
    metadata: dict[str, str] = Field(
        default_factory=dict,
        description="Metadatos del proyecto (public, enable_content_trust, ...).",
    )


class Repository(HarborRecord):
    """Registro de un repositorio, alimentado por eventos del registry."""

    repository_id: int = Field(default=0)
    name: str = Field(default="", description="Nombre completo, p.ej. 'library/nginx'.")
    project_id: int = Field(default=0)
    description: str = Field(default="")
    pull_count: int = Field(default=0)
    star_count: int = Field(default=0)
    creation_time: datetime | None = Field(default=None)
    update_time: datetime | None = Field(default=None)


class ComponentsOverviewEntry(HarborRecord):
    severity: int = Field(default=0)
    count: int = Field(default=0)


class ComponentsOverview(HarborRecord):
    """Total de componentes y su reparto por severidad."""

    total: int = Field(default=0)
    summary: list[ComponentsOverviewEntry] = Field(default_factory=list)


class ImageScanOverview(HarborRecord):
    """Resumen del escaneo de vulnerabilidades de una imagen."""

    digest: str = Field(default="", alias="image_digest")
    status: str = Field(default="", alias="scan_status")
    job_id: int = Field(default=0)
    severity: int = Field(default=0)
    components: ComponentsOverview | None = Field(default=None)
    details_key: str = Field(default="")
    creation_time: datetime | None = Field(default=None)
    update_time: datetime | None = Field(default=None)


class TagConfig(HarborRecord):
    labels: dict[str, str] = Field(default_factory=dict)


class TagDetail(HarborRecord):
    """Detalle de un tag (manifest + config de la imagen)."""

    digest: str = Field(default="")
    name: str = Field(default="")
    size: int = Field(default=0, description="Tamaño en bytes.")
    architecture: str = Field(default="")
    os: str = Field(default="")
    docker_version: str = Field(default="")
    author: str = Field(default="")
    created: datetime | None = Field(default=None)
    config: TagConfig | None = Field(default=None)


class Signature(HarborRecord):
    """Firma Notary de un tag."""

    tag: str = Field(default="")
    hashes: dict[str, Base64Bytes] = Field(
        default_factory=dict,
        description="Hashes por algoritmo; en el JSON viajan en base64.",
    )


class Tag(TagDetail):
    """Tag tal como aparece en el listado de un repositorio.

    Si Harbor está desplegado con Notary, `signature` indica si la imagen está
    firmada; `None` significa sin firmar.
    """

    signature: Signature | None = Field(default=None)
    scan_overview: ImageScanOverview | None = Field(default=None)
