"""
Identifier Resolution

This package classifies, validates and canonicalizes the identifiers carried
by deep-link paths, and describes the native-app target they open.

Key Components:
- engine.py: resolve(), the pipeline entry point
- guard.py: Markup rejection, run before anything else
- classify.py: Request splitting and identifier classification
- validate.py: Per-kind validators
- encoding.py: Hex, multibase and base58 chat key decoders
- charset.py: Shared charset and length checks
- target.py: Target description and canonical redirects
- names.py: Bundled display-name table
- __main__.py: CLI interface for resolution

Identifier Kinds:
1. Browser links (/b/<domain or url>)
2. ENS names (/u/<name>.eth)
3. Chat keys (/u/0x04..., /u/fe701..., /u/zQ3sh...)
4. Group chats (/g/args?a=<admin key>&a1=<name>&a2=<uuid>-<key>)
5. Public channels (/<channel>)
"""

from network.planq.join.resolve.engine import (
    ResolutionOutcome,
    ResolveOptions,
    ValidationError,
    resolve,
)
from network.planq.join.resolve.target import RedirectToCanonical, Success, Target

__all__ = [
    "ResolutionOutcome",
    "ResolveOptions",
    "ValidationError",
    "resolve",
    "RedirectToCanonical",
    "Success",
    "Target",
]
