"""Configuration overrides threaded through StateAction steps.

A default Config may be updated from runtime information, and any field
that touches security should be reported. Each override is its own
StateAction, so steps can be sequenced without passing intermediate
configs around by hand.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from stately.kernel.functions import chain
from stately.kernel.state import StateAction

logger = logging.getLogger(__name__)

SECURE_FIELDS = frozenset({"password", "auth_token"})


class Config(BaseModel):
    """Field selection settings. Immutable; update with ``model_copy``."""

    model_config = ConfigDict(frozen=True)

    common_fields: tuple[str, ...] = ()
    non_common_fields: tuple[str, ...] = ()


class SecurityConcern(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str


DEFAULT_CONFIG = Config(
    common_fields=("firstName", "lastName"),
    non_common_fields=(),
)


def check_for_concern(field: str) -> SecurityConcern | None:
    if field in SECURE_FIELDS:
        return SecurityConcern(field=field)
    return None


def _override(attribute: str, overrides: Sequence[str]) -> StateAction[Config, list[str]]:
    values = tuple(overrides)

    def transition(config: Config) -> tuple[Config, list[str]]:
        if not values:
            return config, []
        return config.model_copy(update={attribute: values}), list(values)

    return StateAction.of(transition)


def override_common_fields(overrides: Sequence[str]) -> StateAction[Config, list[str]]:
    """Replace ``common_fields`` when ``overrides`` is non-empty.

    The result is the list of fields that were applied (empty if none).
    """
    return _override("common_fields", overrides)


def override_non_common_fields(overrides: Sequence[str]) -> StateAction[Config, list[str]]:
    """Replace ``non_common_fields`` when ``overrides`` is non-empty."""
    return _override("non_common_fields", overrides)


def apply_overrides(
    common: Sequence[str],
    non_common: Sequence[str],
) -> StateAction[Config, list[str]]:
    """Apply both overrides in order; the result lists every applied field."""
    return override_common_fields(common).and_then(
        lambda applied_common: override_non_common_fields(non_common).map(
            lambda applied_non_common: applied_common + applied_non_common
        )
    )


def audit_concerns() -> StateAction[Config, list[SecurityConcern]]:
    """Report security-relevant fields in the current config."""
    def find(config: Config) -> list[SecurityConcern]:
        fields = config.common_fields + config.non_common_fields
        return [concern for concern in map(check_for_concern, fields) if concern is not None]

    return StateAction.inspect(find)


def override_fields(
    config: Config,
    common: Sequence[str],
    non_common: Sequence[str],
) -> tuple[Config, list[SecurityConcern]]:
    """Apply overrides to ``config`` and audit the outcome."""
    updated, concerns = apply_overrides(common, non_common).then(audit_concerns()).run(config)
    logger.debug(
        "Applied overrides common=%s non_common=%s, %d security concern(s)",
        list(common),
        list(non_common),
        len(concerns),
    )
    return updated, concerns


def override_fields_with_chain(
    config: Config,
    common: Sequence[str],
    non_common: Sequence[str],
) -> Config:
    """Apply the same overrides as plain ``Config -> Config`` updates, without results."""
    def update_common(current: Config) -> Config:
        if not common:
            return current
        return current.model_copy(update={"common_fields": tuple(common)})

    def update_non_common(current: Config) -> Config:
        if not non_common:
            return current
        return current.model_copy(update={"non_common_fields": tuple(non_common)})

    return chain(update_common, update_non_common)(config)
