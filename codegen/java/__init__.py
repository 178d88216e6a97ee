"""
Codegen Kernel — Java aggregation and composition.

Components:
  names             — import paths and in-file references for protobuf types
  imports           — relevant-type filter and import aggregation
  registrations     — sorted registrations, creator parameters, default constructors
  renderer          — AkkaServerlessFactory and entry point sources (pure, deterministic)
  source_generator  — delegates per component, writes the aggregator files (IO)
"""

from codegen.java.delegates import NoopSourceGenerators, SourceGenerators
from codegen.java.imports import (
    collect_relevant_type_descriptors,
    collect_relevant_types,
    factory_imports,
    generate_imports,
)
from codegen.java.model_loader import dump_model, load_model
from codegen.java.names import qualified_type, type_import
from codegen.java.registrations import creator_parameters, registrations
from codegen.java.renderer import factory_source, main_source
from codegen.java.source_generator import (
    CodegenError,
    DescriptorLoadError,
    generate,
    generate_from_descriptor,
)
from codegen.java.types import GenerationLayout, Model

__all__ = [
    "qualified_type",
    "type_import",
    "collect_relevant_types",
    "collect_relevant_type_descriptors",
    "factory_imports",
    "generate_imports",
    "registrations",
    "creator_parameters",
    "factory_source",
    "main_source",
    "generate",
    "generate_from_descriptor",
    "load_model",
    "dump_model",
    "SourceGenerators",
    "NoopSourceGenerators",
    "GenerationLayout",
    "Model",
    "CodegenError",
    "DescriptorLoadError",
]
