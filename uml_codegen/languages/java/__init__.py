"""
Java code generator module.

Generates Java interfaces and enums from class-diagram classifiers.
"""

from .generator import (
    EmitterState,
    JavaGenerator,
    JavaInterfaceGenerator,
    JavaEnumGenerator,
    create_interface_generator,
    create_enum_generator,
    generate_package,
)
from .accessors import AccessorSynthesizer
from .naming import create_java_sanitizer, create_java_naming_resolver
from .renderer import JavaRenderer
from .types import (
    JavaType,
    JavaTypeConfig,
    JavaTypeResolver,
    TypeResolutionError,
    build_package_name,
)

__all__ = [
    "EmitterState",
    "JavaGenerator",
    "JavaInterfaceGenerator",
    "JavaEnumGenerator",
    "AccessorSynthesizer",
    "JavaRenderer",
    "JavaType",
    "JavaTypeConfig",
    "JavaTypeResolver",
    "TypeResolutionError",
    "build_package_name",
    "generate_package",
    "create_java_sanitizer",
    "create_java_naming_resolver",
    # Factory functions
    "create_interface_generator",
    "create_enum_generator",
]
