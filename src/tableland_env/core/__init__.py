"""Core tableland-env components."""

from .accounts import SignerAccount, signer_addresses
from .resolver import ResolvedContext, resolve
from .runtime import RuntimeEnvironment, extend_environment

__all__ = [
    "ResolvedContext",
    "RuntimeEnvironment",
    "SignerAccount",
    "extend_environment",
    "resolve",
    "signer_addresses",
]
