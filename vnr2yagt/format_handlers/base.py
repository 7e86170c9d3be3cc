#!/usr/bin/env python3
"""
Base class for dictionary format handlers.

FormatHandler is the abstract base class that the VNR XML reader and the
Yagt JSON writer share. It only knows about file extensions;
reading and writing are specific to each handler.
"""

from abc import ABC, abstractmethod


class FormatHandler(ABC):
    """
    Abstract base class for dictionary format handlers.

    A handler owns one file format: which extensions it accepts and how
    its text is turned into (or produced from) plain Python structures.
    """

    @property
    @abstractmethod
    def file_extensions(self) -> list[str]:
        """List of file extensions this handler supports (without dot)."""
        pass

    def accepts(self, filepath: str) -> bool:
        """
        Check whether a path carries one of this handler's extensions.

        Args:
            filepath: Path to the file (need not exist)

        Returns:
            True if the path ends with ".<ext>" (case-sensitive)
        """
        return any(filepath.endswith(f".{ext}") for ext in self.file_extensions)
