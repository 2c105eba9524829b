"""Opciones de consulta (query params).

Tres formas de entrada, cada una con su propio encoder:
- `RawQuery`: texto crudo (objeto JSON de strings o `k=v&k=v`).
- Un modelo de opciones (registro estructurado, subclase de `BaseModel`).
- Un `Mapping` dinámico clave-valor.

Los campos de las opciones son opcionales de forma explícita: `None` significa
"no enviar el parámetro".
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


@dataclass(frozen=True)
class RawQuery:
    """Query ya serializada por el llamador."""

    text: str


class ListOptions(BaseModel):
    """Paginación común a los endpoints de listado."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    page: int | None = Field(default=None, ge=1, description="Página a recuperar.")
    page_size: int | None = Field(default=None, ge=1, description="Resultados por página.")


class ListProjectsOptions(ListOptions):
    name: str | None = Field(default=None, description="Filtro por nombre de proyecto.")
    public: bool | None = Field(default=None, description="Solo proyectos públicos/privados.")
    owner: str | None = Field(default=None, description="Filtro por propietario.")


class ListRepositoriesOptions(ListOptions):
    project_id: int | None = Field(default=None, description="Proyecto al que pertenecen.")
    q: str | None = Field(default=None, description="Búsqueda por nombre de repositorio.")
