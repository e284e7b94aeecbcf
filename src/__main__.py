#!/usr/bin/env python3
"""
flexigraph - Flexible paragraphs for markdown

Renders a markdown document to standalone HTML, turning marked paragraphs
into flexible paragraphs (styled, aligned, optionally wrapped).

As with other ChRIS-style tools, the CLI is built on the chris_plugin
pattern: positional input and output directories, with the pipeline
operating on files inside them.

Marker syntax:
    ~>       plain flexible paragraph
    =>       flexible paragraph inside a wrapper
    ~:w>     classified as "warning", aligned left
    =g|2>    classified as "green" and "type-2", centered, wrapped

Usage:
    flexigraph inputdir/ outputdir/ --inputFile notes.md

Examples:
    # Basic rendering
    flexigraph . output/ --inputFile notes.md

    # Custom dictionary and class names from a YAML options file
    flexigraph . output/ --inputFile notes.md --optionsFile flexigraph.yaml

    # Verbose output
    flexigraph . output/ --inputFile notes.md -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import Compiler, OptionsFile, OptionsFileError, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
   __ _           _                       _
  / _| | _____  _(_) __ _ _ __ __ _ _ __ | |__
 | |_| |/ _ \ \/ / |/ _` | '__/ _` | '_ \| '_ \
 |  _| |  __/>  <| | (_| | | | (_| | |_) | | | |
 |_| |_|\___/_/\_\_|\__, |_|  \__,_| .__/|_| |_|
                    |___/          |_|
  Flexible paragraphs for markdown
"""

# Define CLI arguments
parser = ArgumentParser(
    description="flexigraph - render markdown with flexible paragraph markers",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input markdown file (relative to inputdir)"
)

parser.add_argument(
    "--optionsFile",
    default=None,
    type=str,
    help="YAML file with flexigraph options (relative to inputdir)",
)

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help="Name of the rendered HTML file. Defaults to FLEXIGRAPH_OUTPUT_FILENAME or index.html",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the markdown file
            - optionsSourceFile: Resolved path to the options file, if given
            - htmlOutputdir: Output directory (created)
            - envOK: True if environment is valid

    Exits:
        1 if the input file or the options file is not found
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile

    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    if state.optionsFile:
        options_file = state.inputdir / state.optionsFile
        if not options_file.exists():
            print(f"Error: Options file not found: {options_file}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        state.optionsSourceFile = options_file
        LOG(f"Options file: {options_file}", level=2)

    state.htmlOutputdir = state.outputdir
    state.htmlOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.htmlOutputdir}", level=2)

    state.envOK = True
    return state


def options_load(inputstate: ProgramState) -> ProgramState:
    """
    Load and validate flexigraph options from the options file, if any.

    Args:
        inputstate: Program state after env_check

    Returns:
        ProgramState with added field:
            - extensionOptions: Keyword options for the flexigraph extension
              (empty when no options file was given)

    Exits:
        1 if the options file cannot be parsed or holds invalid options
    """

    state = inputstate.copy()

    if not state.optionsSourceFile:
        LOG("No options file, using defaults", level=2)
        state.extensionOptions = {}
        return state

    LOG("Loading options...", level=1)
    try:
        options_file = OptionsFile(state.optionsSourceFile)
        # Resolve once up front so bad dictionary entries fail here
        options_file.options_resolve()
        state.extensionOptions = options_file.options_get()
        LOG(f"Loaded options: {', '.join(state.extensionOptions) or 'none'}", level=2)
        overrides = options_file.config_get('dictionary', {})
        if overrides:
            LOG(
                "Dictionary overrides: "
                + ", ".join(f"{char}={name or '(unmapped)'}" for char, name in overrides.items()),
                level=2,
            )
    except OptionsFileError as e:
        print(f"Options error: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def source_parse(inputstate: ProgramState) -> ProgramState:
    """
    Read the markdown source file.

    Args:
        inputstate: Program state with inputSourceFile path set

    Returns:
        ProgramState with added field:
            - markdownSource: The markdown text

    Exits:
        1 if the file cannot be read
    """

    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        state.markdownSource = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(state.markdownSource)} characters from {state.inputSourceFile.name}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def html_compile(inputstate: ProgramState) -> ProgramState:
    """
    Render the markdown source to a standalone HTML document.

    Args:
        inputstate: Program state with markdownSource and extensionOptions

    Returns:
        ProgramState with added field:
            - compileResult: Dict containing:
                - status: bool (compilation success)
                - output_file: str (path to the HTML document)
                - paragraph_count: int (paragraphs in the output)
                - flexible_count: int (paragraphs rewritten from markers)

    Exits:
        1 if markdownSource is None or compilation fails
    """

    state = inputstate.copy()

    LOG("Compiling markdown to HTML...", level=1)

    if state.markdownSource is None:
        print("Error: No markdown source available", file=sys.stderr)
        sys.exit(1)

    try:
        compiler = Compiler(
            source=state.markdownSource,
            output_dir=str(state.htmlOutputdir),
            options=state.extensionOptions,
            output_file=state.outputFile,
            verbosity=state.verbosity,
        )
        state.compileResult = compiler.compile()
        LOG(f"Compilation complete: {state.compileResult['flexible_count']} flexible paragraph(s)", level=2)
    except Exception as e:
        print(f"Compilation error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display compilation results to the user.

    Args:
        inputstate: Program state with compileResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if compileResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.compileResult:
        print("Error: Compilation failed", file=sys.stderr)
        sys.exit(1)

    if state.verbosity >= 1:
        LOG("\n✓ Rendering successful!", level=1)
        LOG(f"  Output: {state.compileResult['output_file']}", level=1)
        LOG(f"  Paragraphs: {state.compileResult['paragraph_count']}", level=1)
        LOG(f"  Flexible paragraphs: {state.compileResult['flexible_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="flexigraph - Flexible paragraphs for markdown",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a markdown document with flexible paragraphs.

    Orchestrates the pipeline:
        1. env_check: Validate paths and environment
        2. options_load: Read the optional YAML options file
        3. source_parse: Read the markdown source
        4. html_compile: Render to HTML with the flexigraph extension
        5. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
        inputdir: Directory containing the markdown source
        outputdir: Directory where the HTML document will be written
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, options_load, source_parse, html_compile, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
