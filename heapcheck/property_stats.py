"""
Property result statistics across heap implementations.

Tracks per-property, per-heap outcomes of a property run.
"""
from dataclasses import dataclass
from typing import Optional, Dict, List, Any
from collections import defaultdict


@dataclass
class PropertyOutcome:
    """Result of checking one property against one heap."""
    prop_name: str
    heap: str
    status: str  # 'passed', 'counterexample', 'timeout', 'error'
    time_ms: Optional[float] = None
    counterexample: Optional[Dict[str, Any]] = None


class PropertyStats:
    """Collects and reports property outcomes across heaps."""

    def __init__(self):
        self.results: List[PropertyOutcome] = []
        self._by_property: Dict[str, Dict[str, PropertyOutcome]] = defaultdict(dict)

    def add(self, prop_name: str, heap: str, status: str,
            time_ms: Optional[float] = None,
            counterexample: Optional[Dict[str, Any]] = None):
        """Record a property outcome."""
        outcome = PropertyOutcome(
            prop_name=prop_name,
            heap=heap,
            status=status,
            time_ms=time_ms,
            counterexample=counterexample
        )
        self.results.append(outcome)
        self._by_property[prop_name][heap] = outcome

    def get_heaps(self) -> List[str]:
        """Get list of all heaps that have been checked, in first-seen order."""
        heaps = []
        for result in self.results:
            if result.heap not in heaps:
                heaps.append(result.heap)
        return heaps

    def get_properties(self) -> List[str]:
        return list(self._by_property.keys())

    def failures(self, heap: str) -> List[PropertyOutcome]:
        """All non-passing outcomes recorded for a heap."""
        return [r for r in self.results if r.heap == heap and r.status != 'passed']

    def summary_table(self) -> str:
        """Generate a markdown table of property results."""
        if not self.results:
            return "No properties recorded.\n"

        heaps = self.get_heaps()
        properties = self.get_properties()

        headers = ["Property"] + heaps
        data_rows = []

        for prop_name in properties:
            row_parts = [prop_name]
            prop_results = self._by_property[prop_name]
            for heap in heaps:
                if heap in prop_results:
                    row_parts.append(self._status_symbol(prop_results[heap].status))
                else:
                    row_parts.append("-")
            data_rows.append(row_parts)

        # Calculate column widths
        col_widths = [len(h) for h in headers]
        for row in data_rows:
            for i, cell in enumerate(row):
                col_widths[i] = max(col_widths[i], len(cell))

        def format_row(cells):
            return "| " + " | ".join(cell.ljust(col_widths[i]) for i, cell in enumerate(cells)) + " |"

        header_line = format_row(headers)
        separator = "|" + "|".join("-" * (w + 2) for w in col_widths) + "|"
        row_lines = [format_row(row) for row in data_rows]

        summary = self._summary_counts(heaps)

        table = "\n".join([header_line, separator] + row_lines)
        return f"## Property Results\n\n{table}\n\n{summary}"

    def _status_symbol(self, status: str) -> str:
        """Convert status to display symbol."""
        symbols = {
            'passed': '✓',
            'counterexample': '✗',
            'timeout': 'T/O',
            'error': 'ERR'
        }
        return symbols.get(status, status)

    def _summary_counts(self, heaps: List[str]) -> str:
        """Generate summary counts for each heap."""
        counts = {heap: {'passed': 0, 'counterexample': 0, 'timeout': 0, 'error': 0, 'total': 0}
                  for heap in heaps}

        for result in self._latest():
            c = counts[result.heap]
            c['total'] += 1
            if result.status in c:
                c[result.status] += 1

        lines = []
        for heap in heaps:
            c = counts[heap]
            if c['total'] > 0:
                lines.append(f"- **{heap}**: {c['passed']}/{c['total']} passed, "
                             f"{c['counterexample']}/{c['total']} counterexamples, "
                             f"{c['timeout']} timeouts, {c['error']} errors")

        return "\n".join(lines)

    def _latest(self) -> List[PropertyOutcome]:
        return [outcome for by_heap in self._by_property.values() for outcome in by_heap.values()]
