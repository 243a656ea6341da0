from __future__ import annotations

from .models import AllocationReport


def _cell(value: str) -> str:
    return value.replace("|", "\\|")


def to_markdown(report: AllocationReport) -> str:
    lines: list[str] = []
    lines.append("# Logical ID report")
    lines.append("")
    lines.append(f"- Generated: `{report.generated_at}`")
    lines.append(f"- Scheme: `{report.scheme}`")
    lines.append(f"- Schema: `v{report.schema_version}`")
    if report.stats:
        lines.append(f"- Paths: `{report.stats.paths_total}`")
        lines.append(f"- Assigned: `{report.stats.assigned_total}`")
        lines.append(f"- Renamed: `{report.stats.renamed_total}`")
        lines.append(f"- Errors: `{report.stats.errors_total}`")
        if report.stats.error_counts:
            counts = ", ".join(f"{key}:{value}" for key, value in sorted(report.stats.error_counts.items()))
            lines.append(f"- Errors by kind: `{counts}`")
    lines.append("")

    if report.entries:
        lines.append("## Logical IDs")
        lines.append("")
        lines.append("| Path | Logical ID | Renamed from |")
        lines.append("|---|---|---|")
        for e in report.entries:
            renamed_from = f"`{e.candidate}`" if e.renamed else ""
            lines.append(f"| `{_cell(e.path)}` | `{e.logical_id}` | {renamed_from} |")
        lines.append("")
    else:
        lines.append("No logical IDs assigned.")
        lines.append("")

    if report.errors:
        lines.append("## Errors")
        lines.append("")
        lines.append("| Kind | Path | Message |")
        lines.append("|---|---|---|")
        for err in report.errors:
            path = f"`{_cell(err.path)}`" if err.path else ""
            lines.append(f"| {err.kind} | {path} | {_cell(err.message)} |")
        lines.append("")

    return "\n".join(lines)
