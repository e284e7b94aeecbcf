"""
Centralized logging using Loguru with context-aware verbosity.

The transform runs deep inside Python-Markdown's treeprocessor chain, where
no state can be passed explicitly. LOG() therefore reads the verbosity of
the ProgramState bound to the current context, and stays silent when no
state is bound (library use, tests).

Usage:
    from flexigraph.lib.log import LOG, state_connectToLogger

    # At start of a pipeline stage:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Rendering document", level=1)
    LOG("Rewrote 3 paragraphs", level=2)
    LOG("Marker '~:w>' at offset 12", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<magenta>{module: <12}</magenta> "
    "<cyan>{function: <22}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Bind a ProgramState to the logging context.

    Args:
        state: Object with a `verbosity` attribute (normally ProgramState)
    """
    _program_state.set(state)


def state_disconnectFromLogger() -> None:
    """Unbind any ProgramState so LOG() goes quiet again"""
    _program_state.set(None)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the bound state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Pipeline progress (default)
        2 = Extension and compiler summaries (-v)
        3 = Per-marker traces from the core (-vv)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
