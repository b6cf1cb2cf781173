"""
Language-specific code generators.

This module contains generators for different target languages.
"""

from .java import JavaInterfaceGenerator, JavaEnumGenerator

__all__ = ["JavaInterfaceGenerator", "JavaEnumGenerator"]
