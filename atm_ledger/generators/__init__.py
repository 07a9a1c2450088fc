"""Generators for account identifiers, PINs and demo holders."""

from atm_ledger.generators.credential import HolderGenerator, PinGenerator
from atm_ledger.generators.identifier import IdentifierGenerator

__all__ = ["HolderGenerator", "IdentifierGenerator", "PinGenerator"]
