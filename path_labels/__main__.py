import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click
from rich.console import Console

from path_labels.errors import PathLabelsError
from path_labels.labels.repository import LabelsConfigRepository
from path_labels.read_model import PathRulesReadModel
from path_labels.repositories import CommonRepository
from path_labels.rules.evaluator import apply_path_rule_matches, evaluate_path_rules
from path_labels.rules.models import MatchMode, PathRule
from path_labels.rules.repository import PathRulesRepository, generate_rule_id
from path_labels.tui import PathLabelsConsoleUI
from path_labels.utils import compact_home_paths_in_text


MATCH_VALUES = [mode.value for mode in MatchMode]


def _workspace_option() -> Callable:
    return click.option(
        "-w",
        "--workspace",
        default=None,
        help="Workspace scope (defaults to the global scope).",
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _scope_root(obj: Dict[str, Any], workspace: Optional[str], must_exist: bool = True) -> Path:
    common: CommonRepository = obj["common"]
    try:
        scope_root = common.scope_root(workspace)
    except ValueError as exc:
        raise click.ClickException(compact_home_paths_in_text(str(exc)))
    if workspace is not None and must_exist and not scope_root.is_dir():
        raise click.ClickException(f"Workspace not found: {workspace}")
    return scope_root


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--root",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Configuration root (defaults to $PATH_LABELS_HOME or ~/.config/path-labels).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, root: Optional[Path]) -> None:
    """Automatic session labels from working-directory rules."""
    _configure_logging(verbose)
    ctx.obj = {"common": CommonRepository(root.expanduser() if root else None)}


@cli.group(help="Manage path-to-label rules.")
def rules() -> None:
    pass


@rules.command("list", help="List path rules with their resolved labels.")
@_workspace_option()
@click.pass_obj
def rules_list(obj: Dict[str, Any], workspace: Optional[str]) -> None:
    ui = PathLabelsConsoleUI(Console())
    scope_root = _scope_root(obj, workspace)
    model = PathRulesReadModel(PathRulesRepository(scope_root), LabelsConfigRepository(scope_root))
    ui.render_rules(model.rows(), str(scope_root))


@rules.command("add", help="Add a path rule.")
@click.option("--path", "rule_path", required=True, help="Directory the rule applies to.")
@click.option("--label", "label_id", required=True, help="Label id to apply.")
@click.option("--value", default=None, help="Value for valued labels (label::value).")
@click.option(
    "--match",
    "match_mode",
    type=click.Choice(MATCH_VALUES, case_sensitive=False),
    default=MatchMode.PREFIX.value,
    show_default=True,
)
@click.option("--description", default=None)
@click.option("--disabled", is_flag=True, help="Store the rule without activating it.")
@_workspace_option()
@click.pass_obj
def rules_add(
    obj: Dict[str, Any],
    rule_path: str,
    label_id: str,
    value: Optional[str],
    match_mode: str,
    description: Optional[str],
    disabled: bool,
    workspace: Optional[str],
) -> None:
    ui = PathLabelsConsoleUI(Console())
    repository = PathRulesRepository(_scope_root(obj, workspace, must_exist=False))
    rule = PathRule(
        id=generate_rule_id(),
        path=str(Path(rule_path).expanduser().resolve()),
        match=MatchMode(match_mode.lower()),
        label_id=label_id,
        value=value or None,
        enabled=not disabled,
        description=description,
    )
    try:
        repository.add_rule(rule)
    except (PathLabelsError, ValueError) as exc:
        raise click.ClickException(compact_home_paths_in_text(str(exc)))
    ui.render_rule_saved(rule)


@rules.command("remove", help="Remove a path rule by id.")
@click.argument("rule_id")
@_workspace_option()
@click.pass_obj
def rules_remove(obj: Dict[str, Any], rule_id: str, workspace: Optional[str]) -> None:
    ui = PathLabelsConsoleUI(Console())
    repository = PathRulesRepository(_scope_root(obj, workspace))
    rule = repository.get_rule(rule_id)
    if rule is None:
        raise click.ClickException(f"Path rule not found: {rule_id}")
    try:
        repository.remove_rule(rule_id)
    except PathLabelsError as exc:
        raise click.ClickException(compact_home_paths_in_text(str(exc)))
    ui.render_rule_saved(rule, removed=True)


def _set_enabled(obj: Dict[str, Any], rule_id: str, workspace: Optional[str], enabled: bool) -> None:
    ui = PathLabelsConsoleUI(Console())
    repository = PathRulesRepository(_scope_root(obj, workspace))
    try:
        rule = repository.set_enabled(rule_id, enabled)
    except PathLabelsError as exc:
        raise click.ClickException(compact_home_paths_in_text(str(exc)))
    ui.render_rule_saved(rule)


@rules.command("enable", help="Enable a path rule.")
@click.argument("rule_id")
@_workspace_option()
@click.pass_obj
def rules_enable(obj: Dict[str, Any], rule_id: str, workspace: Optional[str]) -> None:
    _set_enabled(obj, rule_id, workspace, True)


@rules.command("disable", help="Disable a path rule without deleting it.")
@click.argument("rule_id")
@_workspace_option()
@click.pass_obj
def rules_disable(obj: Dict[str, Any], rule_id: str, workspace: Optional[str]) -> None:
    _set_enabled(obj, rule_id, workspace, False)


@cli.command(help="Show which labels the rules assign to a working directory.")
@click.argument("working_directory")
@click.option(
    "-l",
    "--label",
    "existing",
    multiple=True,
    help="Label already on the session (repeatable).",
)
@click.option("--no-validate", is_flag=True, help="Skip checking label ids against labels/config.json.")
@_workspace_option()
@click.pass_obj
def evaluate(
    obj: Dict[str, Any],
    working_directory: str,
    existing: tuple[str, ...],
    no_validate: bool,
    workspace: Optional[str],
) -> None:
    ui = PathLabelsConsoleUI(Console())
    scope_root = _scope_root(obj, workspace)
    config = PathRulesRepository(scope_root).load()
    label_tree = None if no_validate else LabelsConfigRepository(scope_root).load_labels()

    matches = evaluate_path_rules(working_directory, config, label_tree)
    before = list(existing)
    after = apply_path_rule_matches(before, matches)
    ui.render_evaluation(working_directory, matches, before, after or [])


@cli.group(help="Inspect configured workspace scopes.")
def workspaces() -> None:
    pass


@workspaces.command("list", help="List workspace scopes under the configuration root.")
@click.pass_obj
def workspaces_list(obj: Dict[str, Any]) -> None:
    ui = PathLabelsConsoleUI(Console())
    common: CommonRepository = obj["common"]
    ui.render_workspaces(common.list_workspaces(), str(common.root))


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
