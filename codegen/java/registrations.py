"""
Codegen Kernel — Registrations

What the composition root registers, what each creator parameter looks like,
and the default constructors the entry point passes in their place.

Registrations are sorted by their rendered string. That sort is the only
thing keeping the composition root stable across differently ordered
models. Creator parameters and default constructors are NOT sorted: they
follow model order, entities first, and must stay aligned with each other.

Pure functions. No IO.
"""

from __future__ import annotations

from typing import assert_never

from codegen.java.imports import entity_context, service_context, simple_name
from codegen.java.types import (
    ActionService,
    Entity,
    EntityService,
    EventSourcedEntity,
    Model,
    ReplicatedEntity,
    Service,
    ValueEntity,
    ViewService,
)


def registration(model: Model, service: Service) -> str | None:
    """
    Registration expression for one service, or None when an entity-backed
    service names a component the model does not have.
    """
    match service:
        case EntityService():
            entity = model.entities.get(service.component_full_name)
            if entity is None:
                return None
            match entity:
                case EventSourcedEntity() | ValueEntity() | ReplicatedEntity():
                    name = entity.fqn.name
                    return f"register({name}Provider.of(create{name}))"
                case _:
                    assert_never(entity)
        case ViewService():
            return f"register({service.provider_name}.of(create{service.view_class_name}))"
        case ActionService():
            return f"register({service.provider_name}.of(create{service.class_name}))"
        case _:
            assert_never(service)


def registrations(model: Model) -> list[str]:
    """Every resolvable registration, sorted by rendered string."""
    rendered = (registration(model, service) for service in model.services.values())
    return sorted(r for r in rendered if r is not None)


# ---------------------------------------------------------------------------
# Creators
# ---------------------------------------------------------------------------


def component_class_name(component: Entity | Service) -> str | None:
    """Implementation class a creator returns. None for entity-backed services."""
    match component:
        case EventSourcedEntity() | ValueEntity() | ReplicatedEntity():
            return component.fqn.name
        case EntityService():
            return None
        case ViewService():
            return component.view_class_name
        case ActionService():
            return component.class_name
        case _:
            assert_never(component)


def _creator_components(model: Model) -> list[tuple[str, str]]:
    """(context, class name) per creator: entities, then views and actions."""
    creators = [(entity_context(e), e.fqn.name) for e in model.entities.values()]
    for service in model.services.values():
        context = service_context(service)
        class_name = component_class_name(service)
        if context is not None and class_name is not None:
            creators.append((context, class_name))
    return creators


def creator_parameters(model: Model) -> list[str]:
    """`Function<Context, Type> createType` per creator, model order."""
    return [
        f"Function<{simple_name(context)}, {class_name}> create{class_name}"
        for context, class_name in _creator_components(model)
    ]


def default_constructors(model: Model) -> list[str]:
    """`Type::new` per creator, aligned with creator_parameters."""
    return [f"{class_name}::new" for _, class_name in _creator_components(model)]
