"""
Enumerations for alias placeholder syntaxes and placeholder kinds.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class PlaceholderSyntax(str, Enum):
    sigil = "sigil"
    bracket = "bracket"

    def wrap(self, token: str) -> str:
        if self is PlaceholderSyntax.bracket:
            return f"[[{token}]]"
        return f"${token}"


class PlaceholderKind(str, Enum):
    measurement = "measurement"
    column = "column"
    tag = "tag"
    segment = "segment"
    literal = "literal"
