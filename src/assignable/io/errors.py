"""
Custom exceptions for the assignable.io module.

Purpose
- Provide IO-layer specific error types for configuration and tabulation.
- Keep assignable.core as the source of truth for construction errors (see assignable.core.errors).

Source of truth and boundaries
- assignable.core.errors.SchemaError is raised by descriptor validators.
- assignable.io raises Io* errors for configuration and catalog concerns:
  - IoConfigError: invalid settings or an unusable descriptor catalog.

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for errors raised by assignable.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from assignable.core errors.
    """


class IoConfigError(IoError):
    """
    Raised when settings or matrix inputs are invalid.

    Examples:
        - max_depth < 1
        - an empty descriptor catalog, or a catalog entry that is not a descriptor
    """
