"""Common literal values used across component_pages.

Facet keys, markup fragments, and defaults live here so the renderer, writer,
CLI, and tests share one definition. Intended for internal use within the
component_pages package.

Examples
--------
>>> from component_pages import _constants
>>> _constants.PAGE_FILENAME_TEMPLATE.format(facet="props", suffix=".md")
'props.md'
>>> _constants.FACET_KEYS[-1]
'slots'
"""

FACET_KEYS = ("props", "events", "methods", "parts", "custom-props", "slots")

PAGE_FILENAME_TEMPLATE = "{facet}{suffix}"
DEFAULT_FILE_SUFFIX = ".md"
DEFAULT_OUTPUT_DIR = "static/auto-generated"
DEFAULT_NAMESPACE_PREFIX = "ion-"

PARAGRAPH_BREAK = "<br /><br />"
# Markdown tables treat an escaped bar inside inline code as malformed.
FULLWIDTH_VERTICAL_BAR = "｜"
