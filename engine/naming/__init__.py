"""
Series naming subpackage: default names and alias template resolution.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.naming.alias import AliasContext, Placeholder, find_placeholders, resolve_alias
from engine.naming.default import default_name, joined_value_columns

__all__ = [
    "AliasContext",
    "Placeholder",
    "find_placeholders",
    "resolve_alias",
    "default_name",
    "joined_value_columns",
]
