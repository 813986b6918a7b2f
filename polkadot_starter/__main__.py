"""Allow ``python -m polkadot_starter``."""

from polkadot_starter.cli import main

main()
