"""
Model document loading.

A model document is the JSON form of `Model.to_dict()`. It lets a build
that has already introspected its descriptors hand the model over as a
file. Validated with pydantic at the edge; the kernel only ever sees the
frozen dataclasses.

A document that cannot be read or does not validate is fatal.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field, ValidationError

from codegen.java.source_generator import DescriptorLoadError
from codegen.java.types import Model


class PackageNamingDoc(BaseModel):
    model_config = {"extra": "forbid"}

    proto_name: str = Field(min_length=1)
    proto_package: str = ""
    java_package: str
    java_outer_classname: str = Field(min_length=1)
    java_multiple_files: bool = False


class FullyQualifiedNameDoc(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = Field(min_length=1)
    parent: PackageNamingDoc


class CommandDoc(BaseModel):
    model_config = {"extra": "forbid"}

    fqn: FullyQualifiedNameDoc
    input_type: FullyQualifiedNameDoc
    output_type: FullyQualifiedNameDoc


class EventSourcedEntityDoc(BaseModel):
    model_config = {"extra": "forbid"}

    kind: Literal["event_sourced"]
    fqn: FullyQualifiedNameDoc
    entity_type: str = Field(min_length=1)
    state: FullyQualifiedNameDoc | None = None
    events: list[FullyQualifiedNameDoc] = Field(default_factory=list)


class ValueEntityDoc(BaseModel):
    model_config = {"extra": "forbid"}

    kind: Literal["value"]
    fqn: FullyQualifiedNameDoc
    entity_type: str = Field(min_length=1)
    state: FullyQualifiedNameDoc | None = None


class ReplicatedEntityDoc(BaseModel):
    model_config = {"extra": "forbid"}

    kind: Literal["replicated"]
    fqn: FullyQualifiedNameDoc
    entity_type: str = Field(min_length=1)
    data_type: str = ""


class EntityServiceDoc(BaseModel):
    model_config = {"extra": "forbid"}

    kind: Literal["entity"]
    fqn: FullyQualifiedNameDoc
    component_full_name: str = Field(min_length=1)
    commands: list[CommandDoc] = Field(default_factory=list)


class ViewServiceDoc(BaseModel):
    model_config = {"extra": "forbid"}

    kind: Literal["view"]
    fqn: FullyQualifiedNameDoc
    view_class_name: str = Field(min_length=1)
    provider_name: str = Field(min_length=1)
    commands: list[CommandDoc] = Field(default_factory=list)


class ActionServiceDoc(BaseModel):
    model_config = {"extra": "forbid"}

    kind: Literal["action"]
    fqn: FullyQualifiedNameDoc
    class_name: str = Field(min_length=1)
    provider_name: str = Field(min_length=1)
    commands: list[CommandDoc] = Field(default_factory=list)


EntityDoc = Annotated[
    EventSourcedEntityDoc | ValueEntityDoc | ReplicatedEntityDoc,
    Field(discriminator="kind"),
]
ServiceDoc = Annotated[
    EntityServiceDoc | ViewServiceDoc | ActionServiceDoc,
    Field(discriminator="kind"),
]


class ModelDoc(BaseModel):
    """The whole document: entities and services keyed as in the model."""

    model_config = {"extra": "forbid"}

    entities: dict[str, EntityDoc] = Field(default_factory=dict)
    services: dict[str, ServiceDoc] = Field(default_factory=dict)


def parse_model(data: dict) -> Model:
    """Validate a decoded document and convert it to a Model."""
    doc = ModelDoc.model_validate(data)
    return Model.from_dict(doc.model_dump())


def load_model(path: Path) -> Model:
    """Read and validate a model document. Raises DescriptorLoadError."""
    try:
        return parse_model(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        raise DescriptorLoadError(f"There was a problem loading the model document {path}: {e}") from e


def dump_model(model: Model, path: Path) -> Path:
    """Write a model document with stable formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(model.to_dict(), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return path
