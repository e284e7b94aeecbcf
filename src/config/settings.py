"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use FLEXIGRAPH_ prefix (e.g., FLEXIGRAPH_WRAPPER_TAG_NAME=section).

Settings can also be loaded from a .env file in the project root. They
provide the defaults of the flexible paragraph options; explicit options
passed to the extension or read from an options file take precedence.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use FLEXIGRAPH_ prefix.

    Examples:
        FLEXIGRAPH_PARAGRAPH_CLASS_NAME=custom-paragraph
        FLEXIGRAPH_PARAGRAPH_CLASSIFICATION_PREFIX=
        FLEXIGRAPH_PYGMENTS_STYLE=monokai
    """

    model_config = SettingsConfigDict(
        env_prefix="FLEXIGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Paragraph configuration
    paragraph_class_name: str = Field(
        default="flexible-paragraph",
        description="Base class of every marker-styled paragraph",
    )

    paragraph_classification_prefix: str = Field(
        default="flexiparaph",
        description="Prefix of classification and alignment classes (empty for bare names)",
    )

    # Wrapper configuration
    wrapper_tag_name: str = Field(
        default="div",
        description="Element name used to wrap paragraphs introduced by '='",
    )

    wrapper_class_name: str = Field(
        default="flexible-paragraph-wrapper",
        description="Base class of the wrapper element",
    )

    # Output configuration
    output_filename: str = Field(
        default="index.html",
        description="Name of the rendered HTML document inside the output directory",
    )

    document_title: str = Field(
        default="flexigraph",
        description="Fallback <title> of the rendered document",
    )

    pygments_style: str = Field(
        default="default",
        description="Pygments style used by codehilite for fenced code blocks",
    )

    def className_make(self, prefix: str, token: str) -> str:
        """
        Join a class prefix and a token the way paragraph classes are built.

        Args:
            prefix: Classification prefix (may be empty)
            token: Classification name or "align-<alignment>"

        Returns:
            "<prefix>-<token>", or the bare token when prefix is empty

        Example:
            >>> settings = AppSettings()
            >>> settings.className_make("flexiparaph", "warning")
            'flexiparaph-warning'
            >>> settings.className_make("", "align-left")
            'align-left'
        """
        return f"{prefix}-{token}" if prefix else token


# Singleton instance - import this in your code
appsettings = AppSettings()
