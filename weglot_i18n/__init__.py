"""
Weglot i18n file generator.

Translates a source-language locale JSON file into one JSON file per
enabled Weglot language, keeping the nested structure and {{...}}
interpolation placeholders intact.
"""

__version__ = "1.0.0"
