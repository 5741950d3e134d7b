from rich.markup import escape
from rich.table import Column, Table
from rich.text import Text

from path_labels.read_model import PathRuleRow
from path_labels.rules.models import PathRuleMatch
from path_labels.tui.enums import MATCH_MODE_STYLE, UIStyle
from path_labels.utils import compact_home_path


def _joined(labels: list[str]) -> Text:
    return Text(", ".join(labels) or "(none)")


class RulesTable:
    @staticmethod
    def rules_table(rows: list[PathRuleRow]) -> Table:
        table = Table(
            Column(header="ID", overflow="fold", max_width=28),
            Column(header="Path", overflow="ellipsis", max_width=50),
            Column(header="Match", width=7),
            Column(header="Label", overflow="ellipsis", max_width=24),
            Column(header="Enabled", width=8),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for row in rows:
            rule = row.rule
            match_style = MATCH_MODE_STYLE.get(rule.match, UIStyle.WHITE.value)
            if row.label is None:
                label = Text(rule.label_entry, style=UIStyle.RED.value)
            elif rule.value:
                label = Text(f"{row.label.display_name}::{rule.value}")
            else:
                label = Text(row.label.display_name)
            enabled = (
                f"[{UIStyle.GREEN.value}]yes[/{UIStyle.GREEN.value}]"
                if rule.enabled
                else f"[{UIStyle.DIM.value}]no[/{UIStyle.DIM.value}]"
            )
            table.add_row(
                Text(rule.id),
                Text(compact_home_path(rule.path)),
                f"[{match_style}]{rule.match.value}[/{match_style}]",
                label,
                enabled,
                Text(rule.description or "-"),
            )
        return table


class MatchesTable:
    @staticmethod
    def matches_table(matches: list[PathRuleMatch]) -> Table:
        table = Table(
            Column(header="Label entry", overflow="fold"),
            Column(header="Rule", overflow="fold", max_width=28),
            Column(header="Path", overflow="ellipsis"),
            Column(header="Match", width=7),
            expand=True,
            header_style="bold",
        )
        for match in matches:
            rule = match.rule
            table.add_row(
                Text(match.label_entry),
                Text(rule.id),
                Text(compact_home_path(rule.path)),
                rule.match.value,
            )
        return table

    @staticmethod
    def labels_block(before: list[str], after: list[str]) -> Table:
        added = after[len(before):]
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Existing", _joined(before))
        table.add_row("Added", _joined(added))
        table.add_row("Result", _joined(after))
        return table


def scope_caption(path: str) -> str:
    return escape(compact_home_path(path))
