#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the blockdown library.

This module centralizes the byte classes recognized by the block parsers and
the default configuration values used across blockdown.

Constants are organized by category:
1. Byte Classes - Bytes with structural meaning in the input
2. Parser Defaults - Default values for parser options
3. Renderer Defaults - Default values for renderer options
4. CLI - Exit codes and environment variable names
"""

from __future__ import annotations

# =============================================================================
# Byte Classes
# =============================================================================

# Indexing a bytes object yields ints, and ``int in bytes`` tests membership,
# so these are usable directly against ``data[i]``.
WHITESPACE = b" \t"
LINE_BREAK_BYTES = b"\n\r"

SPACE = ord(" ")
LF = ord("\n")
CR = ord("\r")
OPEN_BRACKET = ord("[")
CLOSE_BRACKET = ord("]")
COLON = ord(":")
LESS_THAN = ord("<")
GREATER_THAN = ord(">")

# Title openers mapped to the closer that must end the title
TITLE_DELIMITERS: dict[int, int] = {
    ord("'"): ord("'"),
    ord('"'): ord('"'),
    ord("("): ord(")"),
}

# Leading spaces allowed before a reference definition or a blockquote marker.
# A line indented by this many spaces (or more) is not recognized.
MAX_LEADING_SPACES = 3

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_FLAGS = 0
DEFAULT_DUMP_REFERENCES = False
DEFAULT_MAX_NESTING_DEPTH = 32

# Each quote level costs two stack frames; stays well under the default
# interpreter recursion limit of 1000
MAX_NESTING_DEPTH_LIMIT = 200

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_PARAGRAPH_TAG = "p"
DEFAULT_BLOCKQUOTE_TAG = "blockquote"
DEFAULT_INPUT_ENCODING = "utf-8"

# =============================================================================
# CLI
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7

ENV_CONFIG_VAR = "BLOCKDOWN_CONFIG"
CONFIG_FILENAMES = [".blockdown.toml", ".blockdown.yaml", ".blockdown.yml", ".blockdown.json"]
