"""
Naming utilities for safe code generation.

Turns raw schema names into idiomatic Go identifiers: canonical
initialisms, no spaces, and camel case instead of separators.
"""

import re
from typing import List, Tuple


# Based on the commonInitialisms list used by golint. Order matters: at
# each position the first matching entry wins, so "Https" precedes "Http".
INITIALISM_PAIRS: List[Tuple[str, str]] = [
    ("Api", "API"),
    ("Ascii", "ASCII"),
    ("Cpu", "CPU"),
    ("Css", "CSS"),
    ("Dns", "DNS"),
    ("Eof", "EOF"),
    ("Guid", "GUID"),
    ("Html", "HTML"),
    ("Https", "HTTPS"),
    ("Http", "HTTP"),
    ("Id", "ID"),
    ("Ip", "IP"),
    ("Json", "JSON"),
    ("Lhs", "LHS"),
    ("Qps", "QPS"),
    ("Ram", "RAM"),
    ("Rhs", "RHS"),
    ("Rpc", "RPC"),
    ("Sla", "SLA"),
    ("Smtp", "SMTP"),
    ("Sql", "SQL"),
    ("Ssh", "SSH"),
    ("Tcp", "TCP"),
    ("Tls", "TLS"),
    ("Ttl", "TTL"),
    ("Udp", "UDP"),
    ("Uid", "UID"),
    ("Ui", "UI"),
    ("Uuid", "UUID"),
    ("Uri", "URI"),
    ("Url", "URL"),
    ("Utf8", "UTF8"),
    ("Vm", "VM"),
    ("Xml", "XML"),
    ("Xsrf", "XSRF"),
    ("Xss", "XSS"),
]

_INITIALISMS = dict(INITIALISM_PAIRS)

# Regex alternation tries branches in order, which gives the table priority
_INITIALISM_RE = re.compile("|".join(re.escape(old) for old, _ in INITIALISM_PAIRS))

# A letter at the start of a word: not preceded by a letter, digit or underscore
_WORD_START_RE = re.compile(r"(?<!\w)(\w)")


def title(s: str) -> str:
    """
    Upper-case the first letter of every word, leaving the rest untouched.

    Unlike ``str.title`` this never lower-cases, so ``"userId"`` becomes
    ``"UserId"`` rather than ``"Userid"``. Underscores and digits do not
    start a new word.
    """
    return _WORD_START_RE.sub(lambda m: m.group(1).upper(), s)


def replace_initialisms(s: str) -> str:
    """Canonicalize initialism tokens, e.g. ``"Http"`` -> ``"HTTP"``."""
    return _INITIALISM_RE.sub(lambda m: _INITIALISMS[m.group(0)], s)


def squish(s: str) -> str:
    """Remove all spaces."""
    return s.replace(" ", "")


def _fold_separator(name: str, sep: str) -> str:
    parts = name.split(sep)
    if len(parts) == 1:
        return name
    return parts[0] + "".join(title(part) for part in parts[1:])


def dash_to_camel(name: str) -> str:
    """Convert ``foo-bar`` to ``fooBar``."""
    return _fold_separator(name, "-")


def snake_to_camel(name: str) -> str:
    """Convert ``foo_bar`` to ``fooBar``."""
    return _fold_separator(name, "_")


def normalize(raw: str) -> str:
    """
    Normalize a raw schema name into a Go identifier.

    Steps, in order: initialism canonicalization, space removal, then
    camel-case folding of ``-`` and ``_`` separators. The leading
    character keeps its original case.

    Args:
        raw: Name as written in the schema

    Returns:
        Identifier suitable for a Go type name
    """
    return snake_to_camel(dash_to_camel(squish(replace_initialisms(raw))))


def normalize_title(raw: str) -> str:
    """Normalize a name that must start upper-case, e.g. an exported field."""
    return normalize(title(raw))
