"""
Go-specific naming rules.

Keywords, predeclared identifiers and package naming conventions.
"""


# Go reserved words
GO_RESERVED_WORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}


# Predeclared identifiers a generated type would shadow
GO_PREDECLARED = {
    "any",
    "bool",
    "byte",
    "comparable",
    "complex64",
    "complex128",
    "error",
    "float32",
    "float64",
    "int",
    "int8",
    "int16",
    "int32",
    "int64",
    "rune",
    "string",
    "uint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uintptr",
    "true",
    "false",
    "iota",
    "nil",
}


def is_go_keyword(name: str) -> bool:
    """Check whether an identifier collides with a Go keyword."""
    return name in GO_RESERVED_WORDS


def shadows_predeclared(name: str) -> bool:
    """Check whether a type name hides a predeclared Go identifier."""
    return name in GO_PREDECLARED


def validate_go_package_name(name: str) -> list[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    # Check basic identifier rules
    if not name.isidentifier():
        errors.append(f"'{name}' is not a valid Go identifier")

    # Go-specific rules
    if name[0].isupper():
        errors.append("Package names should be lowercase")

    if "_" in name:
        errors.append("Package names should not contain underscores")

    if "-" in name:
        errors.append("Package names should not contain hyphens")

    # Check against reserved words
    if name.lower() in GO_RESERVED_WORDS:
        errors.append(f"'{name}' is a Go reserved word")

    return errors
