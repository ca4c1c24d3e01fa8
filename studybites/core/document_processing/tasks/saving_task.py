"""
Local JSON persistence for chunk summaries.

Stores one file per (material, chunk): <root>/<material_id>/<chunk_id>.json

Dependencies: pydantic, pathlib
System role: Storage collaborator for the batch dispatcher
"""

from pathlib import Path
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from studybites.core.exceptions import StorageError

from ..models import SummaryResult


class ResultStore(Protocol):
    """Key-value store for processed results keyed by (material_id, chunk_id)."""

    def put(self, material_id: str, chunk_id: str, result: SummaryResult) -> None: ...

    def get(self, material_id: str, chunk_id: str) -> SummaryResult | None: ...


class LocalResultStore:
    """Save summaries as JSON files grouped by material."""

    def __init__(self, output_directory: str) -> None:
        """
        Initialize store with output directory.

        Args:
            output_directory: Root directory for JSON output

        Creates directory if it does not exist.
        """
        self._output_dir = Path(output_directory)
        self._output_dir.mkdir(parents=True, exist_ok=True)

    def put(self, material_id: str, chunk_id: str, result: SummaryResult) -> None:
        """
        Persist a summary.

        Args:
            material_id: Owning material
            chunk_id: Summarized chunk
            result: Summary to store

        Raises:
            StorageError: When an ID is not a usable file name or the file cannot be written
        """
        path = self._result_path(material_id, chunk_id, operation="put")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(result.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(
                f"Failed to store result: {e}",
                operation="put",
                details={"material_id": material_id, "chunk_id": chunk_id},
            ) from e

    def get(self, material_id: str, chunk_id: str) -> SummaryResult | None:
        """
        Load a stored summary.

        Args:
            material_id: Owning material
            chunk_id: Summarized chunk

        Returns:
            SummaryResult | None: Stored result, None when absent

        Raises:
            StorageError: When an ID is not a usable file name or the file cannot be read
        """
        path = self._result_path(material_id, chunk_id, operation="get")
        if not path.exists():
            return None
        return self._load(path, operation="get")

    def list_for_material(self, material_id: str) -> list[SummaryResult]:
        """
        Load every stored summary of a material.

        Args:
            material_id: Owning material

        Returns:
            list[SummaryResult]: Results ordered by timestamp, empty if none

        Raises:
            StorageError: When the material ID is not a usable directory name
        """
        material_dir = self._safe_dir(material_id, operation="list")
        if not material_dir.is_dir():
            return []

        results = [self._load(path, operation="list") for path in material_dir.glob("*.json")]
        return sorted(results, key=lambda r: r.timestamp)

    def _load(self, path: Path, operation: str) -> SummaryResult:
        try:
            return SummaryResult.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, PydanticValidationError) as e:
            raise StorageError(
                f"Failed to read result: {e}",
                operation=operation,
                details={"path": str(path)},
            ) from e

    def _result_path(self, material_id: str, chunk_id: str, operation: str) -> Path:
        file_name = f"{self._safe_name(chunk_id, operation)}.json"
        path = self._safe_dir(material_id, operation) / file_name
        if not path.resolve().is_relative_to(self._output_dir.resolve()):
            raise StorageError(
                "Result path escapes the output directory",
                operation=operation,
                details={"material_id": material_id, "chunk_id": chunk_id},
            )
        return path

    def _safe_dir(self, material_id: str, operation: str) -> Path:
        return self._output_dir / self._safe_name(material_id, operation)

    @staticmethod
    def _safe_name(key: str, operation: str) -> str:
        """Reduce a caller-supplied ID to one path component inside the output directory."""
        name = Path(key).name
        if name in ("", ".", ".."):
            raise StorageError(
                f"Invalid storage key: {key!r}",
                operation=operation,
                details={"key": key},
            )
        return name
