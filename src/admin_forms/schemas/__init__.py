"""
Built-in schemas of the administration console.

``get_schemas()`` returns the process-wide registry, built on first use
and shared read-only afterwards.
"""

import functools
import logging

from admin_forms.builder import Schemas, SchemaSetBuilder
from admin_forms.schemas.listener import build_listener
from admin_forms.schemas.login import build_login

logger = logging.getLogger("admin-forms")

SCHEMA_BUILDERS = (
    build_login,
    build_listener,
)


def build_schemas() -> Schemas:
    """Assemble every built-in schema into a new registry."""
    builder = SchemaSetBuilder()
    for build in SCHEMA_BUILDERS:
        builder = build(builder)
    schemas = builder.build()
    logger.info(f"Loaded {len(schemas)} schemas: {', '.join(schemas.names())}")
    return schemas


@functools.lru_cache(maxsize=1)
def get_schemas() -> Schemas:
    """Get the process-wide schema registry."""
    return build_schemas()


__all__ = [
    "build_listener",
    "build_login",
    "build_schemas",
    "get_schemas",
]
