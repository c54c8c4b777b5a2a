"""
Result sink adapters.
"""

from src.airline_router.adapters.sinks.text_file_sink import (
    MemoryResultSink,
    TextFileResultSink,
)

__all__ = [
    "MemoryResultSink",
    "TextFileResultSink",
]
