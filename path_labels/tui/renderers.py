from typing import Optional

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel

from path_labels.read_model import PathRuleRow
from path_labels.rules.models import PathRule, PathRuleMatch
from path_labels.tui.enums import UIStyle
from path_labels.tui.tables import MatchesTable, RulesTable, scope_caption


def _panel(title: str, body: RenderableType, style: str, subtitle: Optional[str] = None) -> Panel:
    return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))


class PathLabelsConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_rules(self, rows: list[PathRuleRow], scope: str) -> None:
        if not rows:
            self.console.print(
                _panel(
                    "path rules",
                    f"No path rules configured.\n{scope_caption(scope)}",
                    style=UIStyle.YELLOW.value,
                )
            )
            return
        self.console.print(
            _panel(
                "path rules",
                RulesTable.rules_table(rows),
                style=UIStyle.BLUE.value,
                subtitle=scope_caption(scope),
            )
        )
        missing = [row.rule.id for row in rows if row.label_missing]
        if missing:
            self.console.print(
                _panel(
                    "missing labels",
                    "\n".join(f"- {escape(rule_id)}" for rule_id in missing),
                    style=UIStyle.RED.value,
                )
            )

    def render_rule_saved(self, rule: PathRule, removed: bool = False) -> None:
        verb = "Removed" if removed else "Saved"
        border_style = UIStyle.YELLOW.value if removed else UIStyle.GREEN.value
        state = "" if rule.enabled else " (disabled)"
        self.console.print(
            _panel(
                "path rule",
                f"{verb} rule [bold]{escape(rule.id)}[/bold]{state}\n"
                f"{scope_caption(rule.path)} ({rule.match.value}) -> {escape(rule.label_entry)}",
                style=border_style,
            )
        )

    def render_evaluation(
        self,
        working_directory: str,
        matches: list[PathRuleMatch],
        before: list[str],
        after: list[str],
    ) -> None:
        if matches:
            self.console.print(
                _panel(
                    "matches",
                    MatchesTable.matches_table(matches),
                    style=UIStyle.CYAN.value,
                    subtitle=scope_caption(working_directory),
                )
            )
        else:
            self.console.print(
                _panel(
                    "matches",
                    f"No path rules match {scope_caption(working_directory)}.",
                    style=UIStyle.DIM.value,
                )
            )
        self.console.print(
            _panel(
                "labels",
                MatchesTable.labels_block(before, after),
                style=UIStyle.GREEN.value if len(after) > len(before) else UIStyle.DIM.value,
            )
        )

    def render_workspaces(self, names: list[str], root: str) -> None:
        if not names:
            self.console.print(
                _panel(
                    "workspaces",
                    "No workspaces configured.",
                    style=UIStyle.YELLOW.value,
                )
            )
            return
        body = "\n".join(f"- {escape(name)}" for name in names)
        self.console.print(
            _panel(
                f"workspaces ({scope_caption(root)})",
                body,
                style=UIStyle.BLUE.value,
            )
        )
