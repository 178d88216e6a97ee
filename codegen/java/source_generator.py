"""
Codegen Kernel — Source Generator

Sits between the pure functions (imports, registrations, renderer) and the
outside world (the file system, the per-kind generators). Drives one
generation run over a model.

Per service: unresolved → delegated → (success | skipped)
  - an entity-backed service whose component is missing is logged and
    skipped; every other service still runs
Then:
  - AkkaServerlessFactory.java is always rewritten
  - <MainClass>.java is written only if it does not exist yet

This is where IO happens. Everything it renders is pure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import assert_never

from codegen.java.delegates import SourceGenerators
from codegen.java.names import disassemble_class_name, package_as_path
from codegen.java.renderer import factory_source, main_source
from codegen.java.templates import FACTORY_CLASS_NAME
from codegen.java.types import (
    ActionService,
    EntityService,
    GenerationLayout,
    Model,
    Service,
    ViewService,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class CodegenError(Exception):
    """Base class for errors that abort a generation run."""
    pass


class DescriptorLoadError(CodegenError):
    """Descriptor or model source is unreadable or unparsable."""
    pass


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


def generate(
    model: Model,
    layout: GenerationLayout,
    generators: SourceGenerators,
) -> list[Path]:
    """
    Generate every component's sources plus the two aggregator files.
    Returns every path written in this run.
    """
    written: list[Path] = []
    for service in model.services.values():
        written.extend(_generate_service(model, service, layout, generators))

    package_name, main_class_name = disassemble_class_name(layout.main_class)
    package_path = package_as_path(package_name)

    factory_path = layout.generated_source_directory / package_path / f"{FACTORY_CLASS_NAME}.java"
    _write(factory_path, factory_source(package_name, model))
    logger.info("source_generator: wrote %s", factory_path)
    written.append(factory_path)

    main_path = layout.source_directory / package_path / f"{main_class_name}.java"
    if main_path.exists():
        logger.info("source_generator: %s exists, leaving it untouched", main_path)
    else:
        _write(main_path, main_source(package_name, main_class_name, model))
        logger.info("source_generator: wrote %s", main_path)
        written.append(main_path)

    return written


def generate_from_descriptor(
    descriptor: Path,
    layout: GenerationLayout,
    generators: SourceGenerators,
    introspect: Callable[[Path], Model],
) -> list[Path]:
    """
    Build the model with `introspect`, then generate.
    Any failure while loading is fatal: nothing is generated.
    """
    try:
        model = introspect(descriptor)
    except Exception as e:
        raise DescriptorLoadError(f"There was a problem loading the protobuf descriptor {descriptor}: {e}") from e
    return generate(model, layout, generators)


def _generate_service(
    model: Model,
    service: Service,
    layout: GenerationLayout,
    generators: SourceGenerators,
) -> list[Path]:
    match service:
        case EntityService():
            entity = model.entities.get(service.component_full_name)
            if entity is None:
                logger.warning(
                    "source_generator: service [%s] refers to entity [%s], "
                    "but no entity configuration is found for that component name",
                    service.fqn.full_qualified_name,
                    service.component_full_name,
                )
                return []
            paths = [
                *generators.entity_service(entity, service, layout),
                *generators.event_sourced_test_kit(entity, service, layout),
            ]
        case ViewService():
            paths = generators.view_service(service, layout)
        case ActionService():
            paths = generators.action_service(service, layout)
        case _:
            assert_never(service)
    logger.debug("source_generator: %s produced %d file(s)", service.fqn.full_qualified_name, len(paths))
    return paths


def _write(path: Path, source: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8", newline="\n")
