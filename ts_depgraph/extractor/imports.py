"""Regex-based import specifier extraction for JS/TS sources.

Works on text rather than a syntax tree: it tolerates dialects and broken
files, but a specifier-shaped string built inside a template literal can
still be picked up. Comments are removed first by a scanner that knows
about string and template literals.
"""

from __future__ import annotations

import re

from ts_depgraph.resolver.aliases import AliasTable

_NOT_MEMBER = r"(?<![\w$.])"

# import x from "a" / import { a, b as c } from "a" / import * as ns from "a"
# export { a } from "a" / export * from "a" / export * as ns from "a"
_FROM_RE = re.compile(
    _NOT_MEMBER + r"""(?:import|export)\s+[^'"`;]*?\bfrom\s*(['"])([^'"\n]+)\1""",
)
# import "a"  (side effects only)
_BARE_IMPORT_RE = re.compile(_NOT_MEMBER + r"""import\s*(['"])([^'"\n]+)\1""")
# import("a") / import(`a`)
_DYNAMIC_IMPORT_RE = re.compile(
    _NOT_MEMBER + r"""import\s*\(\s*(['"`])([^'"`$\n]+)\1\s*[,)]""",
)
# require("a")
_REQUIRE_RE = re.compile(_NOT_MEMBER + r"""require\s*\(\s*(['"`])([^'"`$\n]+)\1\s*\)""")

_PATTERNS = (_FROM_RE, _BARE_IMPORT_RE, _DYNAMIC_IMPORT_RE, _REQUIRE_RE)


def strip_comments(source: str) -> str:
    """Remove ``//`` and ``/* */`` comments, leaving string literals intact.

    Line comments keep their terminating newline and block comments are
    replaced by a single space so tokens on either side stay apart.
    """
    out: list[str] = []
    in_single_quote = False
    in_double_quote = False
    in_template = False
    length = len(source)
    pos = 0

    while pos < length:
        ch = source[pos]
        next_ch = source[pos + 1] if pos + 1 < length else ""

        if in_single_quote or in_double_quote or in_template:
            out.append(ch)
            if ch == "\\" and next_ch:
                out.append(next_ch)
                pos += 1
            elif in_single_quote and ch in ("'", "\n"):
                in_single_quote = False
            elif in_double_quote and ch in ('"', "\n"):
                in_double_quote = False
            elif in_template and ch == "`":
                in_template = False
        elif ch == "/" and next_ch == "/":
            end = source.find("\n", pos)
            if end == -1:
                break
            pos = end
            continue
        elif ch == "/" and next_ch == "*":
            end = source.find("*/", pos + 2)
            out.append(" ")
            if end == -1:
                break
            pos = end + 2
            continue
        else:
            if ch == "'":
                in_single_quote = True
            elif ch == '"':
                in_double_quote = True
            elif ch == "`":
                in_template = True
            out.append(ch)

        pos += 1

    return "".join(out)


def extract_specifiers(source: str) -> set[str]:
    """Collect every raw import specifier referenced by ``source``.

    Covers static imports, re-exports, side-effect imports, dynamic
    ``import()`` with a literal argument and ``require()``.
    """
    clean = strip_comments(source)
    specifiers: set[str] = set()
    for pattern in _PATTERNS:
        for m in pattern.finditer(clean):
            specifier = m.group(2).strip()
            if specifier:
                specifiers.add(specifier)
    return specifiers


def is_candidate(specifier: str, aliases: AliasTable | None = None) -> bool:
    """True unless ``specifier`` looks like a bare external package name."""
    if specifier.startswith((".", "/")) or "/" in specifier:
        return True
    return aliases is not None and aliases.has_match(specifier)


def filter_candidates(specifiers: set[str], aliases: AliasTable | None = None) -> list[str]:
    """Drop external package references, returning the rest sorted."""
    return sorted(s for s in specifiers if is_candidate(s, aliases))
