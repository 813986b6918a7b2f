"""Frontend setup -- clones, builds and runs create-polkadot-dapp.

Quick usage::

    from polkadot_starter.frontend import setup_frontend_with_polkadot_dapp

    result = await setup_frontend_with_polkadot_dapp("/tmp/my-dapp", "my-dapp")
"""

from polkadot_starter.frontend.setup import (
    FrontendSetupResult,
    ValidationResult,
    reorganize_frontend_structure,
    setup_frontend_with_polkadot_dapp,
    validate_frontend_setup,
)

__all__ = [
    "FrontendSetupResult",
    "ValidationResult",
    "reorganize_frontend_structure",
    "setup_frontend_with_polkadot_dapp",
    "validate_frontend_setup",
]
