"""
flexigraph - Flexible paragraphs for markdown

Splits paragraphs at ~> and => markers into styled, optionally wrapped
paragraphs with alignment and classification classes.
"""

__version__ = "1.0.0"

from .rewriter import BlockRewriter
from .options import options_resolve, OptionsFile, OptionsFileError
from .extension import FlexigraphExtension
from .compiler import Compiler
from .log import LOG, state_connectToLogger

__all__ = [
    "BlockRewriter",
    "options_resolve",
    "OptionsFile",
    "OptionsFileError",
    "FlexigraphExtension",
    "Compiler",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
