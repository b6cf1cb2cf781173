"""
Naming utilities for safe code generation.

Handles case conversions, keyword conflicts and the accessor naming
conventions (getter, setter, adder, singular forms) used by the
generators.
"""

import re
from typing import Set
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.CAMEL_CASE,
        suffix_on_conflict: str = "_",
    ) -> str:
        """
        Sanitize a name for safe use in target language.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for conflicts

        Returns:
            Sanitized name safe for use
        """
        cleaned = self._clean_basic(name)
        converted = self._convert_case(cleaned, target_case)
        return self._resolve_conflicts(converted, suffix_on_conflict)

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words or name in self.builtin_types

    def escape_reserved(self, name: str, suffix: str = "_") -> str:
        """Suffix a reserved word; any other name is returned as written."""
        return self._resolve_conflicts(name, suffix)

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r"[^a-zA-Z0-9_$]", "_", name)
        cleaned = cleaned.strip("_")

        # Ensure doesn't start with number
        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = "value"

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return uncapitalize(name) if "_" not in name else to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return capitalize(name) if "_" not in name else to_pascal_case(name)
        elif target_case == NamingCase.SCREAMING_SNAKE:
            return to_snake_case(name).upper()
        else:
            return name

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Append the suffix to reserved words and builtin names."""
        if self.is_reserved(name):
            return f"{name}{suffix}"
        return name


def capitalize(name: str) -> str:
    """Upper-case the first character only: ``firstName`` -> ``FirstName``."""
    return name[:1].upper() + name[1:]


def uncapitalize(name: str) -> str:
    """Lower-case the first character only: ``FirstName`` -> ``firstName``."""
    return name[:1].lower() + name[1:]


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    name = name.replace("-", "_")
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    name = re.sub(r"_+", "_", name.lower())
    return name.strip("_")


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    parts = to_snake_case(name).split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    return "".join(part.capitalize() for part in to_snake_case(name).split("_") if part)


# Plural -> singular for words the suffix rules get wrong
IRREGULAR_PLURALS = {
    "people": "person",
    "persons": "person",
    "children": "child",
    "men": "man",
    "women": "woman",
    "mice": "mouse",
    "geese": "goose",
    "feet": "foot",
    "teeth": "tooth",
    "indices": "index",
    "matrices": "matrix",
    "vertices": "vertex",
    "criteria": "criterion",
    "phenomena": "phenomenon",
    "lives": "life",
    "wives": "wife",
    "knives": "knife",
    "leaves": "leaf",
    "halves": "half",
    "shelves": "shelf",
    "wolves": "wolf",
    "shoes": "shoe",
    "movies": "movie",
    "cookies": "cookie",
    # -us/-as words that the plain "s" rule cuts to "statuse", "aliase"
    "statuses": "status",
    "buses": "bus",
    "bonuses": "bonus",
    "campuses": "campus",
    "viruses": "virus",
    "censuses": "census",
    "aliases": "alias",
    "biases": "bias",
    "canvases": "canvas",
    "atlases": "atlas",
}

UNCOUNTABLE_WORDS = {
    "data",
    "information",
    "equipment",
    "news",
    "series",
    "species",
    "metadata",
    "money",
}

# (suffix, replacement), first match wins
SINGULAR_RULES = [
    ("ies", "y"),
    ("sses", "ss"),
    ("shes", "sh"),
    ("ches", "ch"),
    ("xes", "x"),
    ("zzes", "zz"),
    ("ss", "ss"),
    ("us", "us"),
    ("is", "is"),
    ("s", ""),
]

_LAST_WORD = re.compile(r"([A-Z]?[a-z0-9]+|[A-Z]+)$")


def singularize(name: str) -> str:
    """
    Singular form of a (conventionally plural) identifier.

    Only the last word of a camelCase name changes:
    ``orderItems`` -> ``orderItem``, ``companies`` -> ``company``.
    Names that are already singular come back unchanged.
    """
    match = _LAST_WORD.search(name)
    if not match:
        return name

    prefix, word = name[: match.start()], match.group(1)
    lower = word.lower()

    if lower in UNCOUNTABLE_WORDS:
        return name

    if lower in IRREGULAR_PLURALS:
        singular = IRREGULAR_PLURALS[lower]
        if word[0].isupper():
            singular = capitalize(singular)
        return prefix + singular

    for suffix, replacement in SINGULAR_RULES:
        if lower.endswith(suffix) and len(lower) > len(suffix):
            return prefix + word[: len(word) - len(suffix)] + replacement

    return name


class NamingResolver:
    """
    Accessor and parameter naming conventions.

    Getter, setter and adder names are derived from the property name;
    adders take one element, so their name uses the singular form.
    """

    def __init__(self, sanitizer: NameSanitizer = None):
        self.sanitizer = sanitizer or NameSanitizer()

    def getter_name(self, property_name: str) -> str:
        return "get" + capitalize(property_name)

    def setter_name(self, property_name: str) -> str:
        return "set" + capitalize(property_name)

    def adder_name(self, property_name: str) -> str:
        return "add" + capitalize(self.singularize(property_name))

    def singularize(self, plural_name: str) -> str:
        return singularize(plural_name)

    def parameter_name(self, name: str) -> str:
        """Lower-camel parameter name that is not a reserved word."""
        return self.sanitizer.sanitize_name(uncapitalize(name), NamingCase.CAMEL_CASE)

    def property_parameter_name(self, property_name: str) -> str:
        """
        Setter/adder parameter name: the property name as written.

        ``first_name`` and ``URL`` stay as they are, so the parameter
        matches the property and its accessor names. Only reserved words
        get a suffix.
        """
        return self.sanitizer.escape_reserved(property_name)
