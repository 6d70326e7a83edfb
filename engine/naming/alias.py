"""
Alias template resolution for series names.

Templates may reference the row context through two placeholder syntaxes:

* ``$token`` where the token is the longest run of ``[A-Za-z0-9_]`` after the
  dollar sign. A dot ends the token, so dotted tag keys cannot be addressed.
* ``[[token]]`` where the token is everything up to the next ``]]``, dots
  included.

Both syntaxes share one token table, checked in order:

* ``m`` / ``measurement``: the query's measurement
* ``col``: value-column names joined with ``-``
* ``tag_<key>``: value of tag ``key`` when present
* ``<digits>``: the N-th ``.`` segment of the row name when in range

Anything that does not resolve is written back verbatim, delimiters included.
The template is scanned once; substituted text is never rescanned.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from config import SEGMENT_SEPARATOR
from engine.enums import PlaceholderKind, PlaceholderSyntax
from engine.naming.default import joined_value_columns

_PLACEHOLDER_RE = re.compile(
    r"\[\[(?P<bracket>.*?)\]\]|\$(?P<sigil>[A-Za-z0-9_]+)",
    re.DOTALL,
)

# most specific pattern first
_TOKEN_TABLE: Tuple[Tuple[PlaceholderKind, re.Pattern[str]], ...] = (
    (PlaceholderKind.measurement, re.compile(r"m|measurement")),
    (PlaceholderKind.column, re.compile(r"col")),
    (PlaceholderKind.tag, re.compile(r"tag_(?P<key>.+)", re.DOTALL)),
    (PlaceholderKind.segment, re.compile(r"(?P<index>[0-9]+)")),
)


@dataclass(frozen=True)
class AliasContext:
    measurement: str
    row_name: str
    columns: Sequence[str]
    tags: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Placeholder:
    syntax: PlaceholderSyntax
    token: str
    kind: PlaceholderKind
    argument: Optional[str] = None

    @property
    def literal(self) -> str:
        return self.syntax.wrap(self.token)


def classify(token: str) -> Tuple[PlaceholderKind, Optional[str]]:
    for kind, pattern in _TOKEN_TABLE:
        m = pattern.fullmatch(token)
        if m is None:
            continue
        if kind is PlaceholderKind.tag:
            return kind, m.group("key")
        if kind is PlaceholderKind.segment:
            return kind, m.group("index")
        return kind, None
    return PlaceholderKind.literal, None


def _placeholder(m: re.Match[str]) -> Placeholder:
    token = m.group("bracket")
    syntax = PlaceholderSyntax.bracket
    if token is None:
        token = m.group("sigil")
        syntax = PlaceholderSyntax.sigil
    kind, argument = classify(token)
    return Placeholder(syntax=syntax, token=token, kind=kind, argument=argument)


def find_placeholders(template: str) -> List[Placeholder]:
    return [_placeholder(m) for m in _PLACEHOLDER_RE.finditer(template)]


def _measurement(ph: Placeholder, ctx: AliasContext) -> Optional[str]:
    return ctx.measurement


def _column(ph: Placeholder, ctx: AliasContext) -> Optional[str]:
    return joined_value_columns(ctx.columns)


def _tag(ph: Placeholder, ctx: AliasContext) -> Optional[str]:
    return ctx.tags.get(ph.argument or "")


def _segment(ph: Placeholder, ctx: AliasContext) -> Optional[str]:
    segments = ctx.row_name.split(SEGMENT_SEPARATOR)
    digits = (ph.argument or "0").lstrip("0") or "0"
    if len(digits) > len(str(len(segments))):
        return None
    pos = int(digits)
    if 0 <= pos < len(segments):
        return segments[pos]
    return None


def _literal(ph: Placeholder, ctx: AliasContext) -> Optional[str]:
    return None


_RESOLVERS: Dict[PlaceholderKind, Callable[[Placeholder, AliasContext], Optional[str]]] = {
    PlaceholderKind.measurement: _measurement,
    PlaceholderKind.column: _column,
    PlaceholderKind.tag: _tag,
    PlaceholderKind.segment: _segment,
    PlaceholderKind.literal: _literal,
}


def resolve_placeholder(ph: Placeholder, ctx: AliasContext) -> str:
    value = _RESOLVERS[ph.kind](ph, ctx)
    return ph.literal if value is None else value


def resolve_alias(template: str, ctx: AliasContext) -> str:
    return _PLACEHOLDER_RE.sub(lambda m: resolve_placeholder(_placeholder(m), ctx), template)
