"""
flexigraph - Flexible paragraphs for markdown

A Python-Markdown extension that turns marked paragraphs into flexible
paragraphs, with optional wrapper, customizable classifications and
customizable alignment:

    ~> I am a flexible paragraph
    => I am a flexible paragraph wrapped in a div
"""

__version__ = "1.0.0"

from .lib import (
    BlockRewriter,
    Compiler,
    FlexigraphExtension,
    OptionsFile,
    OptionsFileError,
    options_resolve,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "BlockRewriter",
    "Compiler",
    "FlexigraphExtension",
    "OptionsFile",
    "OptionsFileError",
    "options_resolve",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
