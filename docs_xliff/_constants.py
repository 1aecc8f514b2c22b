"""Literal values shared across the XLIFF exporter.

The envelope attributes are fixed for every generated document so translation
tools can recognise the producer. Tests, templates, and the configuration
loader import these instead of repeating the strings.

Examples
--------
>>> from docs_xliff import _constants
>>> _constants.XLIFF_NAMESPACE
'urn:oasis:names:tc:xliff:document:1.2'
>>> _constants.TARGET_LANGUAGE
'jp'
"""

XLIFF_VERSION = "1.2"
XLIFF_NAMESPACE = "urn:oasis:names:tc:xliff:document:1.2"
SOURCE_LANGUAGE = "en"
TARGET_LANGUAGE = "jp"
DATATYPE = "plaintext"
ORIGINAL_NAME = "supernova-documentation.data"
TOOL_ID = "supernova.io"
TOOL_NAME = "supernova"
DEFAULT_OUTPUT = "build/translations.xliff"
