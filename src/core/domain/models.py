"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core al SDK de Dialogflow.
- El JSON de entidades que pasa el usuario se valida en el borde.

Nota:
- Estos modelos son registros de paso: se reenvían o se muestran, nunca se
  transforman.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.config import ConfigDict


class Entity(BaseModel):
    """Un valor reconocible de un entity type y sus sinónimos."""

    model_config = ConfigDict(extra="ignore")

    value: str = Field(
        ...,
        min_length=1,
        description="Valor canónico (o template en entity types de tipo composite).",
    )
    synonyms: list[str] = Field(
        default_factory=list,
        description="Sinónimos que resuelven a `value`.",
    )


class EntityType(BaseModel):
    """Categoría de valores reconocibles (p.ej. 'city')."""

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre de recurso: projects/<p>/agent/entityTypes/<id>.",
    )
    display_name: str = Field(
        default="",
        description="Nombre visible en la consola de Dialogflow.",
    )
    kind: str = Field(
        default="KIND_MAP",
        description="KIND_MAP, KIND_LIST o KIND_REGEXP.",
    )
    entities: list[Entity] = Field(
        default_factory=list,
        description="Entidades definidas para el idioma consultado.",
    )


ENTITY_LIST_ADAPTER: TypeAdapter[list[Entity]] = TypeAdapter(list[Entity])
