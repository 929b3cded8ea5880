"""Registry of output formats, keyed by file-name suffix."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Optional, TextIO

from .geometry import SplineListArray

WriterFunc = Callable[..., Any]


@dataclass
class SplineWriter:
    """An output function together with the data it is registered with."""

    func: WriterFunc
    data: Any = None
    description: str = ""

    def write(
        self,
        stream: TextIO,
        name: str,
        llx: int,
        lly: int,
        urx: int,
        ury: int,
        shape: SplineListArray,
    ) -> Any:
        """Write ``shape`` to ``stream``; registered data is passed last."""
        if self.data is None:
            return self.func(stream, name, llx, lly, urx, ury, shape)
        return self.func(stream, name, llx, lly, urx, ury, shape, self.data)


def _file_suffix(filename: str) -> str:
    base = os.path.basename(filename)
    _, dot, suffix = base.rpartition(".")
    return suffix if dot else ""


class OutputRegistry:
    """Output handlers, looked up by case-insensitive suffix."""

    def __init__(self) -> None:
        self._formats: dict[str, SplineWriter] = {}

    def add_handler(
        self,
        suffix: str,
        description: str,
        writer: WriterFunc,
        override: bool = False,
        data: Any = None,
    ) -> None:
        """Register ``writer`` for ``suffix``.

        An existing handler is kept unless ``override`` is true.
        """
        if not suffix:
            raise ValueError("an output handler needs a suffix")
        if not description:
            raise ValueError("an output handler needs a description")
        if not callable(writer):
            raise ValueError("an output handler needs a callable writer")
        key = suffix.lower()
        if key in self._formats and not override:
            return
        self._formats[key] = SplineWriter(writer, data, description)

    def get_handler(self, filename: str) -> Optional[SplineWriter]:
        """The handler for the suffix of ``filename``, or None."""
        return self.get_handler_by_suffix(_file_suffix(filename))

    def get_handler_by_suffix(self, suffix: Optional[str]) -> Optional[SplineWriter]:
        if not suffix:
            return None
        return self._formats.get(suffix.lower())

    def formats(self) -> list[tuple[str, str]]:
        """Pairs of suffix and description for every registered format."""
        return [(suffix, writer.description) for suffix, writer in self._formats.items()]

    def shortlist(self) -> str:
        """The registered suffixes separated by commas."""
        return ", ".join(self._formats)

    def __contains__(self, suffix: object) -> bool:
        return isinstance(suffix, str) and suffix.lower() in self._formats

    def __len__(self) -> int:
        return len(self._formats)