"""Configuration override example domain."""

from .overrides import (
    DEFAULT_CONFIG,
    SECURE_FIELDS,
    Config,
    SecurityConcern,
    apply_overrides,
    audit_concerns,
    check_for_concern,
    override_common_fields,
    override_fields,
    override_fields_with_chain,
    override_non_common_fields,
)

__all__ = [
    "Config",
    "SecurityConcern",
    "DEFAULT_CONFIG",
    "SECURE_FIELDS",
    "check_for_concern",
    "override_common_fields",
    "override_non_common_fields",
    "apply_overrides",
    "audit_concerns",
    "override_fields",
    "override_fields_with_chain",
]
