"""JSON file sink for exporting query results to files."""

import json
from pathlib import Path
from typing import Any

from txn_analytics.exceptions import SinkError
from txn_analytics.logging import get_logger
from txn_analytics.sinks.serialization import serialize_value

logger = get_logger(__name__)


class JsonFileSink:
    """Write each query result to its own JSON file."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SinkError(f"Cannot create output directory {self.output_dir}: {exc}") from exc
        self.pretty = pretty
        self._written: list[Path] = []

    def write_result(self, name: str, result: Any) -> Path:
        """Write one result to ``<output_dir>/<name>.json``.

        Raises
        ------
        SinkError
            If the result cannot be serialized or the file cannot be written.
        """
        file_path = self.output_dir / f"{name}.json"

        try:
            data = serialize_value(result)
            text = json.dumps(data, indent=2 if self.pretty else None, ensure_ascii=False)
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(text)
        except (OSError, TypeError, ValueError) as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        logger.debug("Wrote %s", file_path)
        self._written.append(file_path)
        return file_path

    @property
    def written(self) -> list[Path]:
        """Files written so far, in write order."""
        return list(self._written)

    def close(self) -> None:
        """Log summary."""
        logger.info("JSON files written to: %s", self.output_dir)
        for path in self._written:
            logger.info("  %s", path.name)
