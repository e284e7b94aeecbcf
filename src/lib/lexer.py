"""
Custom Pygments lexer for flexible paragraph markers

Highlights markers inside markdown source, e.g. when documenting the
syntax itself in a fenced code block tagged `flexigraph`.

Token types:
- Keyword: Marker character (~ or =)
- Punctuation: Alignment colons and the closing >
- Name.Attribute: Classification characters
- Operator: The | center separator
- Text: Everything else
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import Text, Punctuation, Name, Keyword, Operator

# Same shape as grammar.REGEX, with the same atomic class run. Its two groups
# are skipped (None) in bygroups.
MARKER_AHEAD = r'(?=[~=]:?(?=([a-z0-9]*))\1\|?(?=([a-z0-9]*))\2:?>)'


class FlexigraphLexer(RegexLexer):
    """
    Lexer for markdown with flexible paragraph markers

    Example:
        ~:w2|> hello

    Tokens:
        ~   → Keyword
        :   → Punctuation
        w2  → Name.Attribute
        |   → Operator
        >   → Punctuation
        hello → Text
    """

    name = 'Flexigraph'
    aliases = ['flexigraph', 'fxg']
    filenames = []

    tokens = {
        'root': [
            # Marker start, only where the grammar would accept a marker
            (MARKER_AHEAD + r'([~=])(:?)', bygroups(None, None, Keyword, Punctuation), 'marker'),

            # Everything else is text
            (r'[^~=]+', Text),
            (r'[~=]', Text),
        ],

        'marker': [
            (r'[a-z0-9]+', Name.Attribute),
            (r'\|', Operator),
            (r'(:?)(>)(\s*)', bygroups(Punctuation, Punctuation, Text), '#pop'),
        ],
    }
