"""
Compiler for markdown documents with flexible paragraphs

Renders markdown source to a standalone HTML document using Python-Markdown,
the flexigraph extension, and codehilite (Pygments) for fenced code.
"""

import html
import re
from pathlib import Path
from typing import Any, Dict, Optional

from markdown import Markdown

from ..config import appsettings
from .extension import FlexigraphExtension
from .log import LOG

DEFAULT_STYLESHEET = """
    body { max-width: 48em; margin: 2em auto; padding: 0 1em; font-family: sans-serif; line-height: 1.5; }
    .flexible-paragraph-wrapper { border: 1px solid #ddd; border-radius: 4px; padding: 0 1em; margin: 1em 0; }
    .flexiparaph-alert, .flexiparaph-danger, .flexiparaph-error { color: #a61b1b; }
    .flexiparaph-warning, .flexiparaph-caution { color: #8a5a00; }
    .flexiparaph-success, .flexiparaph-green { color: #1d6b2a; }
    .flexiparaph-info, .flexiparaph-note, .flexiparaph-blue { color: #1c4f8c; }
    .flexiparaph-tip { font-style: italic; }
    .flexiparaph-framed { border: 1px dashed currentColor; padding: 0.5em; }
"""


class Compiler:
    """
    Compiles markdown source to a standalone HTML document

    Responsibilities:
    - Configure Python-Markdown with the flexigraph extension
    - Convert source to an HTML fragment
    - Wrap the fragment into a complete document
    - Write the output file
    """

    def __init__(
        self,
        source: str,
        output_dir: str,
        options: Optional[Dict[str, Any]] = None,
        output_file: Optional[str] = None,
        title: Optional[str] = None,
        verbosity: int = 1,
    ) -> None:
        """
        Initialize compiler

        Args:
            source: Markdown source text
            output_dir: Directory for compiled output
            options: Keyword options for FlexigraphExtension
            output_file: Output filename (default: settings output_filename)
            title: Document title (default: first heading, then settings)
            verbosity: Output verbosity level (0-3)
        """
        self.source = source
        self.output_dir = Path(output_dir)
        self.output_file = output_file or appsettings.output_filename
        self.title = title
        self.verbosity = verbosity

        self.extension = FlexigraphExtension(**(options or {}))
        self.markdown = Markdown(
            extensions=["extra", "codehilite", self.extension],
            extension_configs={
                "codehilite": {
                    "noclasses": True,
                    "pygments_style": appsettings.pygments_style,
                    "guess_lang": False,
                },
            },
        )
        self.paragraph_count = 0
        self.flexible_count = 0

    def source_convert(self, source: Optional[str] = None) -> str:
        """
        Convert markdown to an HTML fragment

        Args:
            source: Markdown text (default: the compiler's source)

        Returns:
            HTML fragment with flexible paragraphs rewritten
        """
        self.markdown.reset()
        fragment = self.markdown.convert(self.source if source is None else source)

        processor = self.extension.processor
        self.flexible_count = processor.rewritten if processor else 0
        self.paragraph_count = len(re.findall(r'<p[\s>]', fragment))
        LOG(
            f"Converted {len(fragment)} characters of HTML, "
            f"{self.flexible_count} flexible paragraph(s) rewritten",
            level=2,
        )
        return fragment

    def title_get(self) -> str:
        """Title from the constructor, else the first heading, else settings"""
        if self.title:
            return self.title
        match = re.search(r'^#{1,6}\s+(.+?)\s*#*\s*$', self.source, re.MULTILINE)
        if match:
            return match.group(1)
        return appsettings.document_title

    def htmlDocument_build(self, content: str) -> str:
        """
        Build complete HTML document around a fragment

        Args:
            content: Converted HTML fragment

        Returns:
            Complete HTML document
        """
        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{html.escape(self.title_get())}</title>
    <style>{DEFAULT_STYLESHEET}</style>
</head>
<body>
{content}
</body>
</html>
"""

    def compile(self) -> Dict[str, Any]:
        """
        Compile source to an HTML document on disk

        Returns:
            dict with compilation results and statistics
        """
        LOG("Starting compilation...", level=2)

        self.output_dir.mkdir(parents=True, exist_ok=True)

        fragment = self.source_convert()
        document = self.htmlDocument_build(fragment)

        output_file = self.output_dir / self.output_file
        output_file.write_text(document, encoding='utf-8')
        LOG(f"Wrote {output_file}", level=2)

        return {
            'status': True,
            'output_file': str(output_file),
            'paragraph_count': self.paragraph_count,
            'flexible_count': self.flexible_count,
        }
