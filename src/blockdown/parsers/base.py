#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/parsers/base.py
"""Base class for document parsers.

The BaseParser holds what every parser shares: option validation, progress
reporting, and loading of the supported input types into a byte buffer.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Optional, Union

from blockdown.constants import DEFAULT_INPUT_ENCODING
from blockdown.exceptions import FileError, InvalidOptionsError, ValidationError
from blockdown.options.base import BaseParserOptions
from blockdown.progress import ProgressCallback, ProgressEvent

logger = logging.getLogger(__name__)

InputData = Union[bytes, bytearray, memoryview, str, Path, IO[bytes], IO[str]]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parsing options
    progress_callback : ProgressCallback or None, default = None
        Optional callback for progress updates during parsing

    """

    def __init__(self, options: BaseParserOptions | None = None, progress_callback: Optional[ProgressCallback] = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options
        self.progress_callback: Optional[ProgressCallback] = progress_callback

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, output: bytearray, input_data: InputData) -> Any:
        """Parse ``input_data`` and render it into ``output``."""

    def _emit_progress(self, event_type: str, message: str, current: int = 0, total: int = 0, **metadata: Any) -> None:
        """Emit a progress event to the callback if registered.

        If the callback raises an exception, it is logged and rendering goes on.

        Examples
        --------
            >>> self._emit_progress("detected", "Reference found", detected_type="reference")

        """
        if not self.progress_callback:
            return

        try:
            event = ProgressEvent(
                event_type=event_type,  # type: ignore[arg-type]
                message=message,
                current=current,
                total=total,
                metadata=metadata,
            )
            self.progress_callback(event)
        except Exception as e:
            logger.warning(f"Progress callback raised exception: {e}", exc_info=True)

    @staticmethod
    def _load_bytes_content(input_data: InputData) -> bytes:
        """Load data as bytes from the supported input types.

        ``str`` is always treated as document content, never as a path, and is
        encoded as UTF-8. Use a :class:`~pathlib.Path` to read a file.

        Parameters
        ----------
        input_data : bytes, bytearray, memoryview, str, Path, or file-like
            Input data to load

        Returns
        -------
        bytes
            Raw bytes

        Raises
        ------
        FileError
            If a path cannot be read
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, bytes):
            return input_data
        if isinstance(input_data, (bytearray, memoryview)):
            return bytes(input_data)
        if isinstance(input_data, str):
            return input_data.encode(DEFAULT_INPUT_ENCODING)
        if isinstance(input_data, Path):
            try:
                return input_data.read_bytes()
            except OSError as e:
                raise FileError(f"Cannot read input file: {input_data}", file_path=str(input_data), original_error=e) from e
        if hasattr(input_data, "read"):
            content = input_data.read()
            if isinstance(content, str):
                return content.encode(DEFAULT_INPUT_ENCODING)
            return bytes(content)
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )
