"""
Model builders for kernel tests.

Defaults follow the two-component example used throughout the suites:
an event-sourced Counter and a Greeter action, both in package a.b.
"""

from __future__ import annotations

from collections.abc import Sequence

from codegen.java.types import (
    ActionService,
    Command,
    Entity,
    EntityService,
    EventSourcedEntity,
    FullyQualifiedName,
    Model,
    PackageNaming,
    ReplicatedEntity,
    Service,
    ValueEntity,
    ViewService,
)


def unit(
    outer: str,
    package: str = "a.b",
    multiple_files: bool = False,
) -> PackageNaming:
    return PackageNaming(
        proto_name=f"{outer.lower()}.proto",
        proto_package=package,
        java_package=package,
        java_outer_classname=outer,
        java_multiple_files=multiple_files,
    )


def fqn(name: str, parent: PackageNaming) -> FullyQualifiedName:
    return FullyQualifiedName(name=name, parent=parent)


def command(name: str, input_type: FullyQualifiedName, output_type: FullyQualifiedName) -> Command:
    return Command(fqn=fqn(name, input_type.parent), input_type=input_type, output_type=output_type)


EMPTY = fqn("Empty", unit("EmptyProto", package="com.google.protobuf"))


def event_sourced_entity(name: str, package: str = "a.b") -> EventSourcedEntity:
    domain = unit(f"{name}Domain", package=package)
    return EventSourcedEntity(
        fqn=fqn(name, domain),
        entity_type=name.lower(),
        state=fqn(f"{name}State", domain),
    )


def value_entity(name: str, package: str = "a.b") -> ValueEntity:
    domain = unit(f"{name}Domain", package=package)
    return ValueEntity(fqn=fqn(name, domain), entity_type=name.lower(), state=fqn(f"{name}State", domain))


def replicated_entity(name: str, package: str = "a.b") -> ReplicatedEntity:
    return ReplicatedEntity(
        fqn=fqn(name, unit(f"{name}Domain", package=package)),
        entity_type=name.lower(),
        data_type="ReplicatedCounter",
    )


def entity_service(entity_name: str, package: str = "a.b", component: str | None = None) -> EntityService:
    api = unit(f"{entity_name}Api", package=package)
    return EntityService(
        fqn=fqn(f"{entity_name}Service", api),
        component_full_name=component or f"{package}.{entity_name}",
        commands=(command("Increase", fqn("IncreaseValue", api), EMPTY),),
    )


def view_service(name: str, package: str = "a.b") -> ViewService:
    api = unit(f"{name}Model", package=package)
    return ViewService(
        fqn=fqn(f"{name}Service", api),
        view_class_name=name,
        provider_name=f"{name}Provider",
        commands=(command("Update", fqn("ByName", api), fqn("Row", api)),),
    )


def action_service(name: str, package: str = "a.b") -> ActionService:
    api = unit(f"{name}Api", package=package)
    return ActionService(
        fqn=fqn(f"{name}Service", api),
        class_name=name,
        provider_name=f"{name}Provider",
        commands=(command("Greet", fqn("GreetRequest", api), fqn("GreetReply", api)),),
    )


def model(entities: Sequence[Entity] = (), services: Sequence[Service] = ()) -> Model:
    """Entities keyed by full_qualified_name, services by full_name."""
    return Model(
        entities={e.fqn.full_qualified_name: e for e in entities},
        services={s.fqn.full_name: s for s in services},
    )


def counter_greeter_model() -> Model:
    return model(
        entities=[event_sourced_entity("Counter")],
        services=[entity_service("Counter"), action_service("Greeter")],
    )
