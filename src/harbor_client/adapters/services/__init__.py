"""Servicios por familia de recursos.

Por qué un paquete:
- Agrupa un módulo por recurso de la API (proyectos, repositorios).
- Todos comparten la configuración del `Client` que los crea.
"""

from harbor_client.adapters.services.projects import ProjectsService
from harbor_client.adapters.services.repositories import RepositoriesService

__all__ = [
	"ProjectsService",
	"RepositoriesService",
]
