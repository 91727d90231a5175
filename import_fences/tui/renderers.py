from rich.console import Console
from rich.markup import escape

from import_fences.models import ConfigError, LintReport, Policy, Resolution
from import_fences.tui.enums import UIStyle
from import_fences.tui.sections import UISection
from import_fences.tui.tables import PolicyTable, ReportTable
from import_fences.utils import compact_home_path, compact_home_paths_in_text


class FenceConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_report(self, report: LintReport, verbose: bool = False) -> None:
        self.console.print(
            UISection.wrap(
                "import fences",
                ReportTable.summary_block(report),
                style=UIStyle.BLUE.value if report.is_clean() else UIStyle.RED.value,
            )
        )

        for filename, diagnostics in report.by_file().items():
            self.console.print(
                UISection.wrap(
                    escape(filename),
                    ReportTable.diagnostics_table(diagnostics),
                    style=UIStyle.CYAN.value,
                )
            )

        if report.errors:
            errors_text = "\n".join(
                [f"- {escape(compact_home_paths_in_text(str(item)))}" for item in report.errors]
            )
            self.console.print(
                UISection.note("errors", errors_text, style=UIStyle.RED.value)
            )

        if verbose and report.exempt:
            exempt_text = "\n".join([f"- {escape(item)}" for item in report.exempt])
            self.console.print(
                UISection.note("exempt", exempt_text, style=UIStyle.DIM.value)
            )

        if report.is_clean():
            self.console.print(
                UISection.note(
                    "result", "No import boundary violations.", style=UIStyle.GREEN.value
                )
            )

    def render_resolution(self, path: str, result: Resolution) -> None:
        if isinstance(result, ConfigError):
            count = len(result.matching)
            body = f"[bold]{escape(path)}[/bold] matches {count} policies, expected exactly 1."
            self.console.print(
                UISection.note("resolve", body, style=UIStyle.YELLOW.value)
            )
            if result.matching:
                self.console.print(PolicyTable.policies_table(result.matching))
            return

        self.console.print(
            UISection.wrap(
                f"resolve: {escape(path)}",
                PolicyTable.policies_table((result,)),
                style=UIStyle.GREEN.value,
            )
        )

    def render_exempt(self, path: str) -> None:
        self.console.print(
            UISection.note(
                "resolve",
                f"[bold]{escape(path)}[/bold] is exempt from import fences.",
                style=UIStyle.DIM.value,
            )
        )

    def render_config(self, policies: tuple[Policy, ...], source: str) -> None:
        self.console.print(
            UISection.wrap(
                "policies",
                PolicyTable.policies_table(policies),
                style=UIStyle.BLUE.value,
                subtitle=escape(compact_home_path(source)),
            )
        )
