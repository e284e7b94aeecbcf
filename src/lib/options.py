"""
Option resolution and options files

options_resolve() builds the immutable FlexigraphOptions of one transform
instance: settings defaults, then caller overrides, with the dictionary
merged over the built-in table.

OptionsFile loads literal options from YAML, for use from the command line:

    dictionary:
      s: solid
      k: kudos
    paragraph_class_name: custom-paragraph
    paragraph_classification_prefix: paraflex
    wrapper_tag_name: section
    wrapper_class_name: custom-paragraph-wrapper

Function-valued options (computed class names, properties) are only
available through the Python API.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..config import appsettings
from ..models.options import FlexigraphOptions, computable_coerce
from .dictionary import dictionary_merge

# Options an options file may set
FILE_OPTIONS = (
    'dictionary',
    'paragraph_class_name',
    'paragraph_classification_prefix',
    'wrapper_tag_name',
    'wrapper_class_name',
)


def options_resolve(
    dictionary: Optional[Mapping[str, Optional[str]]] = None,
    paragraph_class_name: Any = None,
    paragraph_classification_prefix: Optional[str] = None,
    paragraph_properties: Any = None,
    wrapper_tag_name: Any = None,
    wrapper_class_name: Any = None,
    wrapper_properties: Any = None,
) -> FlexigraphOptions:
    """
    Build effective options from settings defaults and overrides

    Options left as None fall back to the application settings. Literal
    values become Constant options and callables become Computed ones.

    Args:
        dictionary: Entries merged over the built-in dictionary
        paragraph_class_name: Base class (str) or (alignment, classifications) -> list
        paragraph_classification_prefix: Prefix of classification classes ("" for none)
        paragraph_properties: (alignment, classifications) -> dict of attributes
        wrapper_tag_name: Tag name (str) or (alignment, classifications) -> str
        wrapper_class_name: Base class (str) or (alignment, classifications) -> list
        wrapper_properties: (alignment, classifications) -> dict of attributes

    Returns:
        Frozen FlexigraphOptions

    Raises:
        ValueError: If the dictionary has invalid entries, or a properties
                    option is not callable
    """
    for name, value in (('paragraph_properties', paragraph_properties),
                        ('wrapper_properties', wrapper_properties)):
        if value and not callable(value):
            raise ValueError(f"Option '{name}' must be callable, got {type(value).__name__}")

    if paragraph_class_name is None:
        paragraph_class_name = appsettings.paragraph_class_name
    if paragraph_classification_prefix is None:
        paragraph_classification_prefix = appsettings.paragraph_classification_prefix
    if wrapper_tag_name is None:
        wrapper_tag_name = appsettings.wrapper_tag_name
    if wrapper_class_name is None:
        wrapper_class_name = appsettings.wrapper_class_name

    return FlexigraphOptions(
        dictionary=dictionary_merge(dictionary),
        paragraph_class_name=computable_coerce(paragraph_class_name),
        paragraph_classification_prefix=paragraph_classification_prefix,
        wrapper_tag_name=computable_coerce(wrapper_tag_name),
        wrapper_class_name=computable_coerce(wrapper_class_name),
        paragraph_properties=computable_coerce(paragraph_properties) if paragraph_properties else None,
        wrapper_properties=computable_coerce(wrapper_properties) if wrapper_properties else None,
    )


class OptionsFileError(Exception):
    """Raised when an options file cannot be loaded or validated"""
    pass


class OptionsFile:
    """
    Literal flexigraph options read from a YAML file

    Attributes:
        path: Location of the YAML file
        config: Parsed and validated options (only FILE_OPTIONS keys)
    """

    def __init__(self, path: Union[str, Path]):
        """
        Load and validate an options file.

        Args:
            path: YAML file to read

        Raises:
            OptionsFileError: If the file is missing, is not valid YAML, is
                              not a mapping, or holds unknown or ill-typed keys
        """
        self.path = Path(path)

        if not self.path.exists():
            raise OptionsFileError(f"Options file not found: {self.path}")

        self.config = self._config_load()
        self._config_validate()

    def _config_load(self) -> Dict[str, Any]:
        """Load and parse the YAML document"""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                config: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise OptionsFileError(f"Failed to parse {self.path.name}: {e}")
        except OSError as e:
            raise OptionsFileError(f"Failed to read {self.path.name}: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise OptionsFileError(
                f"{self.path.name} must contain a mapping, got {type(config).__name__}"
            )
        return config

    def _config_validate(self) -> None:
        unknown = sorted(set(self.config) - set(FILE_OPTIONS))
        if unknown:
            raise OptionsFileError(
                f"Unknown option(s) in {self.path.name}: {', '.join(map(str, unknown))}"
            )

        dictionary = self.config.get('dictionary')
        if dictionary is not None:
            if not isinstance(dictionary, dict):
                raise OptionsFileError("'dictionary' must be a mapping of characters to names")
            # YAML reads bare digit keys as integers
            self.config['dictionary'] = {str(k): v for k, v in dictionary.items()}

        for key in FILE_OPTIONS[1:]:
            value = self.config.get(key)
            if value is not None and not isinstance(value, str):
                raise OptionsFileError(f"'{key}' must be a string, got {type(value).__name__}")

    def config_get(self, key: str, default: Any = None) -> Any:
        """
        Get an option value, with dot notation for dictionary entries.

        Example:
            options_file.config_get('dictionary.s', 'success')
        """
        value: Any = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def options_get(self) -> Dict[str, Any]:
        """Options as keyword arguments for options_resolve() or the extension"""
        return {key: self.config[key] for key in FILE_OPTIONS if key in self.config}

    def options_resolve(self) -> FlexigraphOptions:
        """
        Resolve the file's options into FlexigraphOptions

        Raises:
            OptionsFileError: If the dictionary holds invalid entries
        """
        try:
            return options_resolve(**self.options_get())
        except ValueError as e:
            raise OptionsFileError(f"Invalid options in {self.path.name}: {e}")

    def __repr__(self) -> str:
        return f"OptionsFile(path='{self.path}')"
