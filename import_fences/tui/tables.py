from rich.markup import escape
from rich.table import Column, Table

from import_fences.models import Diagnostic, LintReport, Policy
from import_fences.tui.enums import MESSAGE_STYLE, UIStyle


class ReportTable:
    @staticmethod
    def summary_block(report: LintReport):
        summary = report.summary()
        chips = [
            f"{key}={summary[key]}"
            for key in ("expectedOneRule", "importNotAllowed", "importForbidden")
            if summary[key] > 0
        ]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Files", str(summary["files"]))
        table.add_row("Diagnostics", str(summary["diagnostics"]))
        table.add_row("Kinds", "  ".join(chips))
        table.add_row("Errors", str(summary["errors"]))
        table.add_row("Exempt", str(summary["exempt"]))
        return table

    @staticmethod
    def diagnostics_table(diagnostics: list[Diagnostic]) -> Table:
        table = Table(
            Column(header="Line", width=6, justify="right"),
            Column(header="Rule", width=18),
            Column(header="Import", overflow="fold", max_width=40),
            Column(header="Message", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for diagnostic in diagnostics:
            style = MESSAGE_STYLE.get(diagnostic.message_id, UIStyle.WHITE.value)
            rule = f"[{style}]{diagnostic.message_id.value}[/{style}]"
            table.add_row(
                f"{diagnostic.location.line}:{diagnostic.location.column}",
                rule,
                escape(diagnostic.data.get("imported", "")),
                escape(diagnostic.message),
            )
        return table


class PolicyTable:
    @staticmethod
    def policies_table(policies: tuple[Policy, ...]) -> Table:
        table = Table(
            Column(header="#", width=4, justify="right"),
            Column(header="Import to", overflow="fold"),
            Column(header="Can import from", overflow="fold"),
            Column(header="Cannot import from", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for index, policy in enumerate(policies):
            payload = policy.as_dict()
            if "canImportFrom" in payload:
                allowed = escape("\n".join(payload["canImportFrom"]))
            else:
                allowed = "[dim](anything)[/dim]"
            table.add_row(
                str(index),
                escape(payload["importTo"]),
                allowed,
                escape("\n".join(payload.get("cannotImportFrom", []))),
            )
        return table
