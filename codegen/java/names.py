"""
Codegen Kernel — Name Resolver

How a protobuf-derived type is imported and how it is referenced once its
declaring unit is imported. Pure functions.
"""

from __future__ import annotations

from pathlib import Path

from codegen.java.types import FullyQualifiedName


def qualified_type(fqn: FullyQualifiedName) -> str:
    """
    In-file reference to a type.

    Multi-file units:  "Name"
    Single-file units: "OuterClassname.Name"
    """
    if fqn.parent.java_multiple_files:
        return fqn.name
    return f"{fqn.parent.java_outer_classname}.{fqn.name}"


def type_import(fqn: FullyQualifiedName) -> str:
    """
    Import path for a type.

    Types nested in a single-file unit share the outer class import, so two of
    them collapse to the same string.
    """
    if fqn.parent.java_multiple_files:
        name = fqn.name
    else:
        name = fqn.parent.java_outer_classname
    return f"{fqn.parent.java_package}.{name}"


def outer_class_import(fqn: FullyQualifiedName) -> str:
    return f"{fqn.parent.java_package}.{fqn.parent.java_outer_classname}"


def lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def package_as_path(package_name: str) -> Path:
    """com.example.shop → com/example/shop"""
    return Path(*package_name.split(".")) if package_name else Path()


def disassemble_class_name(full_class_name: str) -> tuple[str, str]:
    """com.example.Main → ("com.example", "Main")"""
    package_name, _, class_name = full_class_name.rpartition(".")
    return package_name, class_name
