"""
Overriding a default Config with StateAction steps.

This example shows:
1. Each override as its own StateAction
2. Sequencing steps without threading intermediate configs by hand
3. Auditing security-relevant fields on the final config
4. The same update written as a plain chain of Config -> Config functions
"""

import logging

from stately.config import (
    DEFAULT_CONFIG,
    apply_overrides,
    override_fields,
    override_fields_with_chain,
)

logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")


# =============================================================================
# Example 1: Sequenced overrides
# =============================================================================
def example_sequenced_overrides() -> None:
    action = apply_overrides(["email"], ["ssn"])
    config, applied = action.run(DEFAULT_CONFIG)
    print(f"Applied {applied}: {config}")

    # The action is only a description; running it again gives the same answer
    assert action.run(DEFAULT_CONFIG) == (config, applied)


# =============================================================================
# Example 2: Overrides plus a security audit
# =============================================================================
def example_audit() -> None:
    config, concerns = override_fields(DEFAULT_CONFIG, ["email", "auth_token"], ["password"])
    print(f"Config: {config}")
    for concern in concerns:
        print(f"  security concern: {concern.field}")


# =============================================================================
# Example 3: Plain function chain
# =============================================================================
def example_chain() -> None:
    config = override_fields_with_chain(DEFAULT_CONFIG, ["email"], [])
    print(f"Chained: {config}")


if __name__ == "__main__":
    example_sequenced_overrides()
    example_audit()
    example_chain()
