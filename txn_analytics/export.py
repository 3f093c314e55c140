"""Run every query once and hand each result to a sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from txn_analytics.config import QueryConfig
from txn_analytics.exceptions import SinkError
from txn_analytics.logging import get_logger
from txn_analytics.store import TransactionAggregator

logger = get_logger(__name__)


class ResultSink(Protocol):
    """Anything that can take a named query result."""

    def write_result(self, name: str, result: Any) -> Any: ...


Query = Callable[[TransactionAggregator, QueryConfig], Any]

# Output name -> query. Names double as output file stems.
QUERIES: dict[str, Query] = {
    "getTotalTransactionAmount": lambda agg, q: agg.total_transaction_amount(),
    "getTotalTransactionAmountSentBy": (
        lambda agg, q: agg.total_transaction_amount_sent_by(q.sender_full_name)
    ),
    "getMaxTransactionAmount": lambda agg, q: agg.max_transaction_amount(),
    "countUniqueClients": lambda agg, q: agg.count_unique_clients(),
    "hasOpenComplianceIssues": (
        lambda agg, q: agg.has_open_compliance_issues(q.client_full_name)
    ),
    "getTransactionsByBeneficiaryName": lambda agg, q: agg.transactions_by_beneficiary_name(),
    "getUnsolvedIssueIds": lambda agg, q: agg.unsolved_issue_ids(),
    "getAllSolvedIssueMessages": lambda agg, q: agg.all_solved_issue_messages(),
    "getTop3TransactionsByAmount": lambda agg, q: agg.top3_transactions_by_amount(),
    "getTopSender": lambda agg, q: agg.top_sender(),
}


@dataclass
class ExportReport:
    """Outcome of an export run."""

    written: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def export_results(
    aggregator: TransactionAggregator,
    sink: ResultSink,
    queries: QueryConfig | None = None,
) -> ExportReport:
    """Run each query exactly once and write its result.

    A sink failure is logged and recorded for that output only; the
    remaining queries still run.

    Parameters
    ----------
    aggregator : TransactionAggregator
        Loaded transactions.
    sink : ResultSink
        Destination for results.
    queries : QueryConfig | None
        Names passed to the parameterised queries.

    Returns
    -------
    ExportReport
        Written and failed output names.
    """
    queries = queries or QueryConfig()
    report = ExportReport()

    for name, query in QUERIES.items():
        result = query(aggregator, queries)
        try:
            sink.write_result(name, result)
        except SinkError as exc:
            logger.error(
                "Failed to export %s: %s", name, exc, extra={"extra": {"query": name}}
            )
            report.failed[name] = str(exc)
        else:
            report.written.append(name)

    logger.info(
        "Exported %d of %d results (%d failed)",
        len(report.written),
        len(QUERIES),
        len(report.failed),
        extra={"extra": {"written": report.written, "failed": sorted(report.failed)}},
    )
    return report
