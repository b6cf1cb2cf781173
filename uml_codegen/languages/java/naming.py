"""
Java-specific naming utilities and sanitization.

Handles Java reserved words, literals, and naming conventions.
"""

from ...core.naming import NameSanitizer, NamingResolver


# Java reserved words
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "try",
    "void",
    "volatile",
    "while",
}

# Literals that cannot be used as identifiers either
JAVA_LITERALS = {"true", "false", "null"}


def create_java_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Java."""
    return NameSanitizer(JAVA_RESERVED_WORDS, JAVA_LITERALS)


def create_java_naming_resolver() -> NamingResolver:
    """Accessor naming with Java keyword protection for parameters."""
    return NamingResolver(create_java_sanitizer())


def validate_java_package_name(name: str) -> list[str]:
    """
    Validate a dotted Java package name.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        return errors

    for segment in name.split("."):
        if not segment.isidentifier():
            errors.append(f"'{segment}' is not a valid Java identifier")
        elif segment in JAVA_RESERVED_WORDS or segment in JAVA_LITERALS:
            errors.append(f"'{segment}' is a Java reserved word")

    return errors
