"""
Codegen Kernel — Per-kind generator contract

The source generator delegates each component's own implementation and test
sources to these. Each delegate applies its own once-only vs always-regenerate
policy to the files it controls and reports every path it wrote.
"""

from __future__ import annotations

from pathlib import Path

from codegen.java.types import ActionService, Entity, EntityService, GenerationLayout, ViewService


class SourceGenerators:
    """
    Abstract per-kind generators.
    Implement with the real entity/view/action generators, or no-op for
    aggregation-only runs and tests.
    """

    def entity_service(
        self,
        entity: Entity,
        service: EntityService,
        layout: GenerationLayout,
    ) -> list[Path]:
        """Implementation, unit test, and integration test for an entity-backed service."""
        raise NotImplementedError

    def event_sourced_test_kit(
        self,
        entity: Entity,
        service: EntityService,
        layout: GenerationLayout,
    ) -> list[Path]:
        """Test kit sources. Writes nothing for entity kinds it does not cover."""
        raise NotImplementedError

    def view_service(self, service: ViewService, layout: GenerationLayout) -> list[Path]:
        raise NotImplementedError

    def action_service(self, service: ActionService, layout: GenerationLayout) -> list[Path]:
        raise NotImplementedError


class NoopSourceGenerators(SourceGenerators):
    """Writes no component sources; only the aggregator files get generated."""

    def entity_service(self, entity: Entity, service: EntityService, layout: GenerationLayout) -> list[Path]:
        return []

    def event_sourced_test_kit(self, entity: Entity, service: EntityService, layout: GenerationLayout) -> list[Path]:
        return []

    def view_service(self, service: ViewService, layout: GenerationLayout) -> list[Path]:
        return []

    def action_service(self, service: ActionService, layout: GenerationLayout) -> list[Path]:
        return []
