"""
Codegen Kernel — Renderer

Pure functions: (package, model) → Java source string.
No IO. Deterministic: same model → same output, always.

Two files:
- factory_source — the composition root, regenerated on every run
- main_source    — the application entry point, generated once

Each render first materializes its ordered lists (imports, parameters,
registrations, constructors) into a context dict, then makes a single
chevron pass over the template. The *_context functions are public so the
lists can be checked without parsing Java.
"""

from __future__ import annotations

from typing import Any, assert_never

import chevron

from codegen.java.imports import factory_imports, import_list
from codegen.java.registrations import creator_parameters, default_constructors, registrations
from codegen.java.templates import (
    FACTORY_CLASS_NAME,
    FACTORY_TEMPLATE,
    GENERATED_CODE_COMMENT,
    INDENT,
    MAIN_TEMPLATE,
    MANAGED_CODE_COMMENT,
)
from codegen.java.types import (
    ActionService,
    EntityService,
    EventSourcedEntity,
    Model,
    ReplicatedEntity,
    ValueEntity,
    ViewService,
)

# ---------------------------------------------------------------------------
# Composition root
# ---------------------------------------------------------------------------


def factory_context(package_name: str, model: Model) -> dict[str, Any]:
    return {
        "header": MANAGED_CODE_COMMENT,
        "package": package_name,
        "imports": factory_imports(package_name, model),
        "class_name": FACTORY_CLASS_NAME,
        "parameters": creator_parameters(model),
        "registrations": registrations(model),
    }


def factory_source(package_name: str, model: Model) -> str:
    """
    Render AkkaServerlessFactory.java.
    One creator parameter per entity and view/action; one registration per
    resolvable service, chained onto a fresh AkkaServerless.
    """
    context = factory_context(package_name, model)
    return chevron.render(
        FACTORY_TEMPLATE,
        {
            **context,
            "parameters": f",\n{INDENT}".join(context["parameters"]),
            "registrations": f"\n{INDENT}".join(f".{r}" for r in context["registrations"]),
        },
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def component_imports(model: Model) -> list[str]:
    """Qualified implementation classes the entry point constructs."""
    imports: list[str] = []
    for entity in model.entities.values():
        match entity:
            case EventSourcedEntity() | ValueEntity() | ReplicatedEntity():
                imports.append(entity.fqn.full_qualified_name)
            case _:
                assert_never(entity)
    for service in model.services.values():
        match service:
            case EntityService():
                pass
            case ViewService() | ActionService():
                imports.append(service.class_name_qualified)
            case _:
                assert_never(service)
    return imports


def main_context(package_name: str, main_class_name: str, model: Model) -> dict[str, Any]:
    return {
        "header": GENERATED_CODE_COMMENT,
        "package": package_name,
        "imports": import_list([], package_name, component_imports(model)),
        "class_name": main_class_name,
        "factory_class_name": FACTORY_CLASS_NAME,
        "constructors": default_constructors(model),
    }


def main_source(package_name: str, main_class_name: str, model: Model) -> str:
    """
    Render the entry point. Every component is created with its no-arg
    constructor (`Type::new`) instead of a caller-supplied creator.
    """
    context = main_context(package_name, main_class_name, model)
    return chevron.render(
        MAIN_TEMPLATE,
        {**context, "constructors": f",\n{INDENT}".join(context["constructors"])},
    )
