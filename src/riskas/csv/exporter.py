"""CSV export of the ledger and its totals."""

import csv
import io
from pathlib import Path
from typing import TextIO

from riskas.services.ledger_service import LedgerService

CSV_COLUMNS = ["id", "date", "type", "description", "amount"]


class CsvExporter:
    """
    CSV exporter for the transaction ledger.

    Writes one row per transaction (newest first) followed by a blank
    line and the income, expense and net totals.
    """

    def __init__(self, ledger_service: LedgerService):
        self._ledger = ledger_service

    def write(self, stream: TextIO) -> int:
        """Write the report to an open text stream. Returns the row count."""
        transactions = self._ledger.list_transactions()
        summary = self._ledger.summary()

        writer = csv.DictWriter(stream, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for txn in transactions:
            writer.writerow({
                "id": txn.id,
                "date": txn.date.isoformat() if txn.date else "",
                "type": txn.type.value,
                "description": txn.description,
                "amount": str(txn.amount),
            })

        totals = csv.writer(stream)
        totals.writerow([])
        totals.writerow(["Total income", str(summary.total_income)])
        totals.writerow(["Total expenses", str(summary.total_expenses)])
        totals.writerow(["Net balance", str(summary.net_balance)])
        return len(transactions)

    def render(self) -> str:
        """Return the report as a string."""
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()

    def export_csv(self, path: str) -> int:
        """
        Export the report to a CSV file.

        Args:
            path: Output file path; parent directories are created.

        Returns:
            Number of transactions written.
        """
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", newline="", encoding="utf-8") as csvfile:
            return self.write(csvfile)
