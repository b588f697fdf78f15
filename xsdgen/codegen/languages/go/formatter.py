"""
Formatting pass for generated Go source.

Does the part of gofmt/goimports that generated struct declarations
need: tab indentation, aligned field columns, and the ``time`` import.
"""

import re
from typing import List

from ...core.generator import FormatError
from ....logging_config import get_logger

logger = get_logger(__name__)

_STRUCT_OPEN_RE = re.compile(r"^type\s+\S+\s+struct\s*\{$")
_FIELD_RE = re.compile(r"^(?P<name>\S+)\s+(?P<type>\S+)(?:\s+(?P<tag>`[^`]*`))?$")
_TAG_RE = re.compile(r"`[^`]*`")
_TIME_IMPORT_RE = re.compile(r'^\s*(import\s+)?"time"\s*$', re.MULTILINE)


def check_balanced(code: str) -> None:
    """
    Verify braces balance outside raw strings and comments.

    Raises:
        FormatError: On a stray or missing brace, or an unterminated tag
    """
    depth = 0
    line_no = 1
    in_raw = False
    i = 0
    while i < len(code):
        ch = code[i]
        if ch == "\n":
            line_no += 1
        elif in_raw:
            if ch == "`":
                in_raw = False
        elif ch == "`":
            in_raw = True
        elif code.startswith("//", i):
            end = code.find("\n", i)
            if end == -1:
                break
            i = end
            continue
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth < 0:
                raise FormatError(f"line {line_no}: unexpected '}}'")
        i += 1

    if in_raw:
        raise FormatError("unterminated struct tag")
    if depth != 0:
        raise FormatError(f"expected '}}', found EOF ({depth} unclosed)")


def align_struct_fields(lines: List[str]) -> List[str]:
    """Indent struct bodies with one tab and align name, type and tag columns."""
    result = []
    body: List[str] = []
    in_struct = False

    for line in lines:
        stripped = line.strip()
        if not in_struct:
            result.append(stripped if _STRUCT_OPEN_RE.match(stripped) else line)
            in_struct = bool(_STRUCT_OPEN_RE.match(stripped))
            continue

        if stripped == "}":
            result.extend(_align_block(body))
            result.append("}")
            body = []
            in_struct = False
        elif stripped:
            body.append(stripped)

    # Unclosed struct bodies are caught by check_balanced
    result.extend(body)
    return result


def _align_block(body: List[str]) -> List[str]:
    parsed = []
    for line in body:
        match = _FIELD_RE.match(line)
        if match is None:
            parsed.append(None)
        else:
            parsed.append((match.group("name"), match.group("type"), match.group("tag")))

    fields = [p for p in parsed if p is not None]
    name_width = max((len(f[0]) for f in fields), default=0)
    type_width = max((len(f[1]) for f in fields if f[2]), default=0)

    aligned = []
    for line, fld in zip(body, parsed):
        if fld is None:
            aligned.append("\t" + line)
            continue
        name, typ, tag = fld
        if tag:
            aligned.append(f"\t{name.ljust(name_width)} {typ.ljust(type_width)} {tag}")
        else:
            aligned.append(f"\t{name.ljust(name_width)} {typ}".rstrip())
    return aligned


def collapse_blank_lines(lines: List[str]) -> List[str]:
    """Strip trailing whitespace and keep at most one blank line in a row."""
    result = []
    for line in lines:
        line = line.rstrip()
        if not line and (not result or not result[-1]):
            continue
        result.append(line)
    while result and not result[-1]:
        result.pop()
    return result


def uses_time(code: str) -> bool:
    """Check whether code outside comments and struct tags references the time package."""
    for line in code.split("\n"):
        if line.lstrip().startswith("//"):
            continue
        if re.search(r"\btime\.", _TAG_RE.sub("", line)):
            return True
    return False


def resolve_imports(code: str) -> str:
    """
    Add the ``time`` import when the code needs it.

    The import goes after the package clause, or at the top of a fragment.
    """
    if not uses_time(code) or _TIME_IMPORT_RE.search(code):
        return code

    lines = code.split("\n")
    for i, line in enumerate(lines):
        if line.startswith("package "):
            lines[i + 1:i + 1] = ["", 'import "time"']
            logger.debug("Added time import after package clause")
            return "\n".join(lines)

    logger.debug("Added time import to fragment")
    return 'import "time"\n\n' + code


def format_go_source(code: str) -> str:
    """
    Format generated Go source.

    Args:
        code: Raw generated buffer

    Returns:
        Formatted source ending in a single newline

    Raises:
        FormatError: If the buffer is not well formed
    """
    check_balanced(code)
    lines = align_struct_fields(code.split("\n"))
    lines = collapse_blank_lines(lines)
    if not lines:
        return ""
    return resolve_imports("\n".join(lines) + "\n")
