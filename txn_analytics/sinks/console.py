"""Console sink for debugging and development."""

import json
from typing import Any

from txn_analytics.sinks.serialization import serialize_value


class ConsoleSink:
    """Output query results to console (stdout) for debugging."""

    def __init__(self, pretty: bool = True) -> None:
        self.pretty = pretty
        self._names: list[str] = []

    def write_result(self, name: str, result: Any) -> None:
        """Print a single result under a header."""
        print(f"\n{'='*60}")
        print(f"Query: {name}")
        print("=" * 60)

        data = serialize_value(result)
        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            print(json.dumps(data, ensure_ascii=False))

        self._names.append(name)

    def close(self) -> None:
        """Print summary."""
        print(f"\n{'='*60}")
        print(f"Printed {len(self._names)} results")
        print("=" * 60)
