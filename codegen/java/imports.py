"""
Codegen Kernel — Imports

Relevant-type filtering and import aggregation for generated Java files.

Every function here returns an explicit, materialized list so ordering and
dedup rules can be tested apart from the final text layout. Anything that
ends up in a file is deduplicated and sorted; the model's map order never
leaks into an import block.

Pure functions. No IO.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from codegen.java.names import outer_class_import, type_import
from codegen.java.types import (
    ActionService,
    Entity,
    EntityService,
    EventSourcedEntity,
    FullyQualifiedName,
    Model,
    ReplicatedEntity,
    Service,
    ValueEntity,
    ViewService,
)

# ---------------------------------------------------------------------------
# SDK names
# ---------------------------------------------------------------------------

AKKA_SERVERLESS = "com.akkaserverless.javasdk.AkkaServerless"
FUNCTION = "java.util.function.Function"

EVENT_SOURCED_ENTITY_CONTEXT = "com.akkaserverless.javasdk.eventsourcedentity.EventSourcedEntityContext"
VALUE_ENTITY_CONTEXT = "com.akkaserverless.javasdk.valueentity.ValueEntityContext"
REPLICATED_ENTITY_CONTEXT = "com.akkaserverless.javasdk.replicatedentity.ReplicatedEntityContext"
ACTION_CREATION_CONTEXT = "com.akkaserverless.javasdk.action.ActionCreationContext"
VIEW_CREATION_CONTEXT = "com.akkaserverless.javasdk.view.ViewCreationContext"


def simple_name(qualified_name: str) -> str:
    return qualified_name.rpartition(".")[2]


def entity_context(entity: Entity) -> str:
    """Qualified creation-context type handed to an entity's creator."""
    match entity:
        case EventSourcedEntity():
            return EVENT_SOURCED_ENTITY_CONTEXT
        case ValueEntity():
            return VALUE_ENTITY_CONTEXT
        case ReplicatedEntity():
            return REPLICATED_ENTITY_CONTEXT
        case _:
            assert_never(entity)


def service_context(service: Service) -> str | None:
    """
    Qualified creation-context type for a service's creator.
    Entity-backed services have none: their entity is the component.
    """
    match service:
        case EntityService():
            return None
        case ViewService():
            return VIEW_CREATION_CONTEXT
        case ActionService():
            return ACTION_CREATION_CONTEXT
        case _:
            assert_never(service)


# ---------------------------------------------------------------------------
# Relevant-type filter
# ---------------------------------------------------------------------------


def collect_relevant_types(
    full_qualified_names: Iterable[FullyQualifiedName],
    service: FullyQualifiedName,
) -> list[FullyQualifiedName]:
    """
    Drop types declared in the same unit as `service`; they need no import.
    Order and duplicates of the remainder are preserved.
    """
    return [desc for desc in full_qualified_names if desc.parent != service.parent]


def collect_relevant_type_descriptors(
    full_qualified_names: Iterable[FullyQualifiedName],
    service: FullyQualifiedName,
) -> str:
    """
    Descriptor accessors for the relevant types, one per declaring unit,
    deduplicated, sorted, and joined with ",\\n".
    """
    descriptors = {
        f"{desc.parent.java_outer_classname}.getDescriptor()"
        for desc in collect_relevant_types(full_qualified_names, service)
    }
    return ",\n".join(sorted(descriptors))


# ---------------------------------------------------------------------------
# Generic import builder
# ---------------------------------------------------------------------------


def import_list(
    types: Iterable[FullyQualifiedName],
    package_name: str,
    other_imports: Iterable[str] = (),
) -> list[str]:
    """
    Qualified names to import into a file in `package_name`.
    Types from the same package are skipped; other_imports are taken as given.
    """
    message_imports = [type_import(typ) for typ in types if typ.parent.java_package != package_name]
    return sorted(set(message_imports) | set(other_imports))


def render_imports(imports: Iterable[str]) -> str:
    return "\n".join(f"import {name};" for name in imports)


def generate_imports(
    types: Iterable[FullyQualifiedName],
    package_name: str,
    other_imports: Iterable[str] = (),
) -> str:
    """Rendered import block, one `import x;` per line."""
    return render_imports(import_list(types, package_name, other_imports))


# ---------------------------------------------------------------------------
# Composition root imports
# ---------------------------------------------------------------------------


def entity_imports(package_name: str, model: Model) -> list[str]:
    imports: list[str] = []
    for entity in model.entities.values():
        if entity.fqn.parent.java_package == package_name:
            continue
        imports.append(entity.fqn.full_qualified_name)
        imports.append(outer_class_import(entity.fqn))
        match entity:
            case EventSourcedEntity() | ValueEntity() | ReplicatedEntity():
                imports.append(f"{entity.fqn.full_qualified_name}Provider")
            case _:
                assert_never(entity)
    return imports


def service_imports(package_name: str, model: Model) -> list[str]:
    imports: list[str] = []
    for service in model.services.values():
        if service.fqn.parent.java_package == package_name:
            continue
        imports.append(outer_class_import(service.fqn))
        match service:
            case EntityService():
                pass
            case ViewService() | ActionService():
                imports.append(service.class_name_qualified)
                imports.append(service.provider_name_qualified)
            case _:
                assert_never(service)
    return imports


def payload_imports(model: Model) -> list[str]:
    """Outer classes of command payloads declared outside each service's own unit."""
    imports: list[str] = []
    for service in model.services.values():
        types = [t for cmd in service.commands for t in (cmd.input_type, cmd.output_type)]
        imports.extend(outer_class_import(typ) for typ in collect_relevant_types(types, service.fqn))
    return imports


def context_imports(model: Model) -> set[str]:
    """One context group per distinct component kind, however many instances."""
    contexts = {entity_context(entity) for entity in model.entities.values()}
    contexts |= {ctx for ctx in map(service_context, model.services.values()) if ctx is not None}
    if not contexts:
        return set()
    return contexts | {FUNCTION}


def factory_imports(package_name: str, model: Model) -> list[str]:
    """All imports of the composition root: deduplicated and sorted."""
    return sorted(
        {AKKA_SERVERLESS}
        | set(entity_imports(package_name, model))
        | set(service_imports(package_name, model))
        | set(payload_imports(model))
        | context_imports(model)
    )
