"""Printable and downloadable projections of a distribution result."""

import html
from io import BytesIO
from typing import Optional

import pandas as pd

from components.charts import share_donut, trainees_vs_instructors_bar
from config.defaults import DEPARTMENT_NAME, RESULT_COLUMNS
from engine.allocation_engine import summarize_allocation
from models.advisory import AdvisoryReport
from models.allocation import AllocationResult


def result_to_df(result: AllocationResult) -> pd.DataFrame:
    """One row per specialization, in distribution order."""
    rows = [
        [c.label, c.weight, c.share, c.percentage, round(c.trainees_per_instructor, 2)]
        for c in result.categories
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def summary_to_df(result: AllocationResult) -> pd.DataFrame:
    summary = summarize_allocation(result)
    rows = [
        ("Total trainees", summary["total"]),
        ("Total instructors", summary["total_weight"]),
        ("Specializations", summary["category_count"]),
        ("Average trainees per instructor", round(summary["average_ratio"], 2)),
        ("Largest share", f"{summary['largest_label']} ({summary['largest_share']})"),
        ("Smallest share", f"{summary['smallest_label']} ({summary['smallest_share']})"),
        ("Load spread (trainees/instructor)", round(summary["load_spread"], 2)),
    ]
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def advisory_to_df(advisory: AdvisoryReport) -> pd.DataFrame:
    rows = [("Summary", advisory.summary), ("Efficiency score", advisory.efficiency_score)]
    rows += [(f"Recommendation {i}", rec) for i, rec in enumerate(advisory.recommendations, start=1)]
    return pd.DataFrame(rows, columns=["Item", "Detail"])


def build_html_report(
    result: AllocationResult,
    advisory: Optional[AdvisoryReport] = None,
    include_charts: bool = True,
) -> str:
    """Self-contained HTML document suitable for printing."""
    parts = [
        "<html><head><meta charset='utf-8'><title>Trainee Distribution Report</title>",
        "<style>body{font-family:sans-serif;margin:2em}table{border-collapse:collapse}"
        "td,th{border:1px solid #cbd5e1;padding:4px 10px}</style></head><body>",
        f"<h1>Trainee Distribution Report</h1><p>{html.escape(DEPARTMENT_NAME)}</p>",
        "<h2>Summary</h2>",
        summary_to_df(result).to_html(index=False),
        "<h2>Distribution</h2>",
        result_to_df(result).to_html(index=False),
    ]

    if include_charts:
        parts.append(trainees_vs_instructors_bar(result).to_html(full_html=False, include_plotlyjs="cdn"))
        parts.append(share_donut(result).to_html(full_html=False, include_plotlyjs=False))

    if advisory is not None:
        parts.append("<h2>Advisory Report</h2>")
        if advisory.is_fallback:
            parts.append("<p><em>Generated locally; the advisory service was unavailable.</em></p>")
        parts.append(f"<p><strong>Efficiency score:</strong> {advisory.efficiency_score}%</p>")
        parts.append(f"<p>{html.escape(advisory.summary)}</p><ol>")
        parts.extend(f"<li>{html.escape(rec)}</li>" for rec in advisory.recommendations)
        parts.append("</ol>")

    parts.append("</body></html>")
    return "\n".join(parts)


def build_excel_report(result: AllocationResult, advisory: Optional[AdvisoryReport] = None) -> bytes:
    """Excel workbook with distribution, summary and (optionally) advisory sheets."""
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        result_to_df(result).to_excel(writer, sheet_name="Distribution", index=False)
        summary_to_df(result).to_excel(writer, sheet_name="Summary", index=False)
        if advisory is not None:
            advisory_to_df(advisory).to_excel(writer, sheet_name="Advisory", index=False)
    buffer.seek(0)
    return buffer.getvalue()
