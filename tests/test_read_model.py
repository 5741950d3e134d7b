from pathlib import Path

import pytest

from path_labels.errors import RulesWriteError
from path_labels.labels.repository import LabelsConfigRepository
from path_labels.read_model import PathRulesReadModel
from path_labels.rules.models import MatchMode, PathRule, PathRulesConfig
from path_labels.rules.repository import PathRulesRepository


RULES = [
    {"id": "r1", "path": "/work", "match": "prefix", "labelId": "backend", "description": "Work"},
    {"id": "r2", "path": "/tmp", "match": "exact", "labelId": "ghost", "enabled": False},
]


def _model(scope_root: Path) -> PathRulesReadModel:
    return PathRulesReadModel(PathRulesRepository(scope_root), LabelsConfigRepository(scope_root))


def test_rows_resolve_labels(scope_root: Path, write_rules, write_labels) -> None:
    write_rules(scope_root, RULES)
    write_labels(scope_root, [{"id": "area", "children": [{"id": "backend", "name": "Backend"}]}])

    rows = _model(scope_root).rows()

    assert [row.rule.id for row in rows] == ["r1", "r2"]
    assert rows[0].label is not None
    assert rows[0].as_dict()["label"] == "Backend"
    assert rows[1].label_missing is True
    assert rows[1].as_dict() == {
        "id": "r2",
        "path": "/tmp",
        "match": "exact",
        "label": "ghost",
        "label_missing": True,
        "value": "",
        "enabled": False,
        "description": "",
    }


def test_missing_documents_give_empty_model(scope_root: Path) -> None:
    model = _model(scope_root)

    assert model.rules == ()
    assert model.rows() == []


def test_save_persists_and_notifies(scope_root: Path) -> None:
    model = _model(scope_root)
    seen: list[PathRulesConfig] = []
    model.subscribe(seen.append)
    config = PathRulesConfig(
        version=1,
        rules=(PathRule(id="r1", path="/a", match=MatchMode.PREFIX, label_id="x"),),
    )

    model.save(config)

    assert model.config == config
    assert seen == [config]
    assert PathRulesRepository(scope_root).load() == config


def test_save_failure_propagates_without_notifying(scope_root: Path) -> None:
    model = _model(scope_root)
    seen: list[PathRulesConfig] = []
    model.subscribe(seen.append)
    scope_root.mkdir(parents=True)
    (scope_root / "labels").write_text("file", encoding="utf-8")

    with pytest.raises(RulesWriteError):
        model.save(PathRulesConfig.empty())

    assert seen == []


def test_notify_changed_reloads(scope_root: Path, write_rules) -> None:
    model = _model(scope_root)
    seen: list[PathRulesConfig] = []
    model.subscribe(seen.append)
    write_rules(scope_root, RULES)

    model.notify_changed()

    assert [rule.id for rule in model.rules] == ["r1", "r2"]
    assert len(seen) == 1


def test_unsubscribe_stops_notifications(scope_root: Path) -> None:
    model = _model(scope_root)
    seen: list[PathRulesConfig] = []
    unsubscribe = model.subscribe(seen.append)

    unsubscribe()
    model.notify_changed()

    assert seen == []
    unsubscribe()


def test_failing_listener_does_not_block_others(scope_root: Path) -> None:
    model = _model(scope_root)
    seen: list[PathRulesConfig] = []

    def broken(_config: PathRulesConfig) -> None:
        raise RuntimeError("boom")

    model.subscribe(broken)
    model.subscribe(seen.append)
    model.notify_changed()

    assert len(seen) == 1
