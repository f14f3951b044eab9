#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/progress.py
"""Progress callback system for document rendering.

This module provides a standardized way to report rendering progress to
embedders. Rendering is a single synchronous call, so the events mostly mark
pass boundaries and reference extraction.

Examples
--------
    >>> from blockdown import to_xhtml
    >>> from blockdown.progress import ProgressEvent
    >>>
    >>> def handler(event: ProgressEvent) -> None:
    ...     if event.event_type == "detected":
    ...         print(event.metadata["reference_id"])
    >>>
    >>> html = to_xhtml("[a]: /x\\n\\nbody\\n", progress_callback=handler)
    a

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

# Event type literals for type safety
EventType = Literal["started", "item_done", "detected", "finished", "error"]


@dataclass
class ProgressEvent:
    """Progress event emitted while rendering a document.

    Parameters
    ----------
    event_type : EventType
        Type of progress event:

        - "started": Rendering has begun. ``total`` is the input size in bytes.
        - "item_done": A pass has completed. ``metadata["item_type"]`` is
          ``"normalization"`` or ``"rendering"``.
        - "detected": A reference-link definition was extracted.
          ``metadata["detected_type"]`` is ``"reference"``.
        - "finished": Rendering completed successfully.
        - "error": A renderer callback failed. Details in ``metadata["error"]``.

    message : str
        Human-readable description of the event
    current : int, default 0
        Current progress position
    total : int, default 0
        Total amount of work. Set to 0 if unknown.
    metadata : dict, default empty
        Additional event-specific information

    """

    event_type: EventType
    message: str
    current: int = 0
    total: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return human-readable string representation.

        Returns
        -------
        str
            Formatted event description

        """
        progress = f"({self.current}/{self.total})" if self.total > 0 else ""
        return f"[{self.event_type.upper()}] {self.message} {progress}".strip()


# Type alias for progress callback functions
ProgressCallback = Callable[[ProgressEvent], None]
"""Type alias for progress callback functions.

A progress callback is any callable that accepts a ProgressEvent and returns None.
Exceptions raised by a callback are logged and otherwise ignored.
"""
