"""
Codegen Kernel — Shared Types

Data classes used across names, imports, registrations, renderer, and the
source generator. These are the contracts that bind the kernel together.

The model is built once per run by descriptor introspection, consumed once
by the source generator, and discarded. Everything here is frozen.

Closed unions:
- Entity  = EventSourcedEntity | ValueEntity | ReplicatedEntity
- Service = EntityService | ViewService | ActionService

Consumers match on these with `assert_never` in the fallthrough branch, so a
new kind has to be handled everywhere it is consumed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeAlias, assert_never

if TYPE_CHECKING:
    from codegen.config import Settings


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PackageNaming:
    """
    The compilation unit (proto file) that declares a type.

    java_multiple_files=True  → every type gets its own Java file
    java_multiple_files=False → types are nested in java_outer_classname
    """

    proto_name: str
    proto_package: str
    java_package: str
    java_outer_classname: str
    java_multiple_files: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "proto_name": self.proto_name,
            "proto_package": self.proto_package,
            "java_package": self.java_package,
            "java_outer_classname": self.java_outer_classname,
            "java_multiple_files": self.java_multiple_files,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> PackageNaming:
        return cls(
            proto_name=d["proto_name"],
            proto_package=d.get("proto_package", d.get("java_package", "")),
            java_package=d["java_package"],
            java_outer_classname=d["java_outer_classname"],
            java_multiple_files=d.get("java_multiple_files", False),
        )


@dataclass(frozen=True)
class FullyQualifiedName:
    """A type's simple name plus the compilation unit that declares it."""

    name: str
    parent: PackageNaming

    @property
    def full_name(self) -> str:
        return f"{self.parent.proto_package}.{self.name}"

    @property
    def full_qualified_name(self) -> str:
        return f"{self.parent.java_package}.{self.name}"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "parent": self.parent.to_dict()}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> FullyQualifiedName:
        return cls(name=d["name"], parent=PackageNaming.from_dict(d["parent"]))


@dataclass(frozen=True)
class Command:
    """One RPC method of a service."""

    fqn: FullyQualifiedName
    input_type: FullyQualifiedName
    output_type: FullyQualifiedName

    def to_dict(self) -> dict[str, Any]:
        return {
            "fqn": self.fqn.to_dict(),
            "input_type": self.input_type.to_dict(),
            "output_type": self.output_type.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Command:
        return cls(
            fqn=FullyQualifiedName.from_dict(d["fqn"]),
            input_type=FullyQualifiedName.from_dict(d["input_type"]),
            output_type=FullyQualifiedName.from_dict(d["output_type"]),
        )


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EventSourcedEntity:
    fqn: FullyQualifiedName
    entity_type: str
    state: FullyQualifiedName | None = None
    events: tuple[FullyQualifiedName, ...] = ()


@dataclass(frozen=True)
class ValueEntity:
    fqn: FullyQualifiedName
    entity_type: str
    state: FullyQualifiedName | None = None


@dataclass(frozen=True)
class ReplicatedEntity:
    fqn: FullyQualifiedName
    entity_type: str
    data_type: str = ""


Entity: TypeAlias = EventSourcedEntity | ValueEntity | ReplicatedEntity


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EntityService:
    """An RPC service backed by the entity named by component_full_name."""

    fqn: FullyQualifiedName
    component_full_name: str
    commands: tuple[Command, ...] = ()


@dataclass(frozen=True)
class ViewService:
    fqn: FullyQualifiedName
    view_class_name: str
    provider_name: str
    commands: tuple[Command, ...] = ()

    @property
    def class_name_qualified(self) -> str:
        return f"{self.fqn.parent.java_package}.{self.view_class_name}"

    @property
    def provider_name_qualified(self) -> str:
        return f"{self.fqn.parent.java_package}.{self.provider_name}"


@dataclass(frozen=True)
class ActionService:
    fqn: FullyQualifiedName
    class_name: str
    provider_name: str
    commands: tuple[Command, ...] = ()

    @property
    def class_name_qualified(self) -> str:
        return f"{self.fqn.parent.java_package}.{self.class_name}"

    @property
    def provider_name_qualified(self) -> str:
        return f"{self.fqn.parent.java_package}.{self.provider_name}"


Service: TypeAlias = EntityService | ViewService | ActionService


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Model:
    """
    Everything introspected from one descriptor set.

    - entities: dict[component_id, Entity]
    - services: dict[service_name, Service]

    An EntityService's component_full_name should match an entity key, but a
    miss is recoverable: the source generator logs it and skips the service.
    """

    entities: dict[str, Entity] = field(default_factory=dict)
    services: dict[str, Service] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "entities": {key: _entity_to_dict(e) for key, e in self.entities.items()},
            "services": {key: _service_to_dict(s) for key, s in self.services.items()},
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Model:
        return cls(
            entities={key: _entity_from_dict(e) for key, e in d.get("entities", {}).items()},
            services={key: _service_from_dict(s) for key, s in d.get("services", {}).items()},
        )


@dataclass(frozen=True)
class GenerationLayout:
    """Where one generation run reads and writes, plus the entry point class."""

    source_directory: Path
    test_source_directory: Path
    integration_test_source_directory: Path
    generated_source_directory: Path
    generated_test_source_directory: Path
    main_class: str  # fully qualified, e.g. "com.example.Main"

    @classmethod
    def from_settings(cls, settings: Settings) -> GenerationLayout:
        return cls(
            source_directory=Path(settings.SOURCE_DIR),
            test_source_directory=Path(settings.TEST_SOURCE_DIR),
            integration_test_source_directory=Path(settings.IT_SOURCE_DIR),
            generated_source_directory=Path(settings.GENERATED_SOURCE_DIR),
            generated_test_source_directory=Path(settings.GENERATED_TEST_SOURCE_DIR),
            main_class=settings.MAIN_CLASS,
        )


# ---------------------------------------------------------------------------
# Serialization helpers
# ---------------------------------------------------------------------------


def _optional_fqn(d: dict[str, Any] | None) -> FullyQualifiedName | None:
    return FullyQualifiedName.from_dict(d) if d is not None else None


def _entity_to_dict(entity: Entity) -> dict[str, Any]:
    d: dict[str, Any] = {"fqn": entity.fqn.to_dict(), "entity_type": entity.entity_type}
    match entity:
        case EventSourcedEntity():
            d["kind"] = "event_sourced"
            d["state"] = entity.state.to_dict() if entity.state else None
            d["events"] = [e.to_dict() for e in entity.events]
        case ValueEntity():
            d["kind"] = "value"
            d["state"] = entity.state.to_dict() if entity.state else None
        case ReplicatedEntity():
            d["kind"] = "replicated"
            d["data_type"] = entity.data_type
        case _:
            assert_never(entity)
    return d


def _entity_from_dict(d: dict[str, Any]) -> Entity:
    fqn = FullyQualifiedName.from_dict(d["fqn"])
    kind = d["kind"]
    if kind == "event_sourced":
        return EventSourcedEntity(
            fqn=fqn,
            entity_type=d["entity_type"],
            state=_optional_fqn(d.get("state")),
            events=tuple(FullyQualifiedName.from_dict(e) for e in d.get("events", [])),
        )
    if kind == "value":
        return ValueEntity(fqn=fqn, entity_type=d["entity_type"], state=_optional_fqn(d.get("state")))
    if kind == "replicated":
        return ReplicatedEntity(fqn=fqn, entity_type=d["entity_type"], data_type=d.get("data_type", ""))
    raise ValueError(f"Unknown entity kind: {kind}")


def _service_to_dict(service: Service) -> dict[str, Any]:
    d: dict[str, Any] = {
        "fqn": service.fqn.to_dict(),
        "commands": [c.to_dict() for c in service.commands],
    }
    match service:
        case EntityService():
            d["kind"] = "entity"
            d["component_full_name"] = service.component_full_name
        case ViewService():
            d["kind"] = "view"
            d["view_class_name"] = service.view_class_name
            d["provider_name"] = service.provider_name
        case ActionService():
            d["kind"] = "action"
            d["class_name"] = service.class_name
            d["provider_name"] = service.provider_name
        case _:
            assert_never(service)
    return d


def _service_from_dict(d: dict[str, Any]) -> Service:
    fqn = FullyQualifiedName.from_dict(d["fqn"])
    commands = tuple(Command.from_dict(c) for c in d.get("commands", []))
    kind = d["kind"]
    if kind == "entity":
        return EntityService(fqn=fqn, component_full_name=d["component_full_name"], commands=commands)
    if kind == "view":
        return ViewService(
            fqn=fqn,
            view_class_name=d["view_class_name"],
            provider_name=d["provider_name"],
            commands=commands,
        )
    if kind == "action":
        return ActionService(
            fqn=fqn,
            class_name=d["class_name"],
            provider_name=d["provider_name"],
            commands=commands,
        )
    raise ValueError(f"Unknown service kind: {kind}")
