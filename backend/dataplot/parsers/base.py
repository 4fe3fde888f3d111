"""Base classes and interfaces for submission parsers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class BaseParser(ABC):
    """Turn raw submitted text into structured records."""

    @abstractmethod
    def parse(self, source: str) -> list[dict[str, Any]]:
        """Parse the provided source and return structured records."""
        raise NotImplementedError

    def parse_file(self, path: Path | str) -> list[dict[str, Any]]:
        """Parse a UTF-8 text file holding a submission."""
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Submission file not found at: {file_path}")
        return self.parse(file_path.read_text(encoding="utf-8"))
