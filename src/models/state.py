"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the compilation pipeline (state bus pattern).

    Each stage receives a copy of the state, fills in its own fields and
    hands it on to the next stage.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, optionsFile, outputFile
        - env_check: inputSourceFile, optionsSourceFile, htmlOutputdir, envOK
        - options_load: extensionOptions
        - source_parse: markdownSource
        - html_compile: compileResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the markdown source
        outputdir: Base output directory for the rendered document
        verbosity: Logging verbosity level (1-3)
        inputFile: Markdown filename (relative to inputdir)
        optionsFile: Optional YAML options filename (relative to inputdir)
        outputFile: Optional output filename, defaults to the settings value
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the markdown file
        optionsSourceFile: Resolved path to the options file, if any
        htmlOutputdir: Directory the HTML document is written to
        extensionOptions: Keyword options for the flexigraph extension
        markdownSource: Markdown text read from inputSourceFile
        compileResult: Compilation results (output_file, counts, status)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    optionsFile: Optional[str] = field(default=None)
    outputFile: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    optionsSourceFile: Optional[Path] = field(default=None)
    htmlOutputdir: Path = field(default=Path("/"))
    extensionOptions: Dict[str, Any] = field(default_factory=dict)
    markdownSource: Optional[str] = field(default=None)
    compileResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, optionsFile, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for compilation output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Namespace may carry extra plugin arguments; keep only known fields
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            options_load,
            source_parse,
            html_compile,
            results_report
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
