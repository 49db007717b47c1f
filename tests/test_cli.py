import json
import logging

import pytest
import yaml

from tap_audit.app.main import load_artifacts, load_config, main

OVERLAPPING = {
    "ViewportIsMobileOptimized": True,
    "TapTargets": [
        {
            "clientRects": [{"left": 0, "top": 0, "width": 20, "height": 20}],
            "href": "https://example.com/a",
            "snippet": "<a>A</a>",
            "path": "1,HTML,1,BODY,0,A",
            "selector": "a.first",
        },
        {
            "clientRects": [{"left": 15, "top": 15, "width": 20, "height": 20}],
            "href": "https://example.com/b",
            "snippet": "<a>B</a>",
            "path": "1,HTML,1,BODY,1,A",
            "selector": "a.second",
        },
    ],
}


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(yaml.safe_dump(data))
    return path


def test_load_artifacts_reads_collector_keys(tmp_path):
    artifacts = load_artifacts(str(_write(tmp_path, "page.yaml", OVERLAPPING)))
    assert artifacts.viewport_is_mobile_optimized
    assert len(artifacts.tap_targets) == 2
    assert artifacts.tap_targets[1].client_rects[0].left == 15


def test_load_artifacts_without_viewport_flag_exits(tmp_path, capsys):
    path = tmp_path / "targets.json"
    path.write_text(json.dumps({"TapTargets": OVERLAPPING["TapTargets"]}))
    with pytest.raises(SystemExit) as exc:
        load_artifacts(str(path))
    assert exc.value.code == 1
    assert "Error validating artifacts" in capsys.readouterr().out


def test_load_artifacts_directory_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        load_artifacts(str(tmp_path))
    assert exc.value.code == 1
    assert "not found" in capsys.readouterr().out


def test_load_artifacts_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        load_artifacts(str(tmp_path / "missing.yaml"))
    assert exc.value.code == 1


def test_load_artifacts_invalid_rect_exits(tmp_path, capsys):
    data = {"TapTargets": [{"clientRects": [{"x": 0, "y": 0, "width": -5, "height": 10}]}]}
    with pytest.raises(SystemExit) as exc:
        load_artifacts(str(_write(tmp_path, "bad.yaml", data)))
    assert exc.value.code == 1
    assert "Error validating artifacts" in capsys.readouterr().out


def test_load_config_merges_file_and_overrides(tmp_path):
    path = _write(tmp_path, "config.yaml", {"finger_size_px": 40, "edge_alignment_tolerance_px": 3})
    config = load_config(str(path), {"max_acceptable_overlap_score_ratio": 0.5, "finger_size_px": None})
    assert config.finger_size_px == 40
    assert config.edge_alignment_tolerance_px == 3
    assert config.max_acceptable_overlap_score_ratio == 0.5


def test_load_config_rejects_unknown_keys(tmp_path, capsys):
    path = _write(tmp_path, "config.yaml", {"thumb_size": 40})
    with pytest.raises(SystemExit):
        load_config(str(path), {})
    assert "thumb_size" in capsys.readouterr().out


def test_main_reports_failure(tmp_path, capsys):
    code = main([str(_write(tmp_path, "page.yaml", OVERLAPPING))])
    out = capsys.readouterr().out
    assert code == 2
    assert "FAILED" in out
    assert "<a>A</a> (20x20) -> <a>B</a>" in out


def test_main_json_output(tmp_path, capsys):
    code = main([str(_write(tmp_path, "page.yaml", OVERLAPPING)), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert code == 2
    assert data["score"] == 0.0
    [item] = data["details"]["items"]
    assert item["tapTarget"]["selector"] == "a.first"
    assert item["overlappingTarget"]["path"] == "1,HTML,1,BODY,1,A"


def test_main_not_mobile_optimized_skips(tmp_path, capsys):
    code = main([str(_write(tmp_path, "page.yaml", OVERLAPPING)), "--not-mobile-optimized"])
    assert code == 0
    assert "SKIPPED" in capsys.readouterr().out


def test_main_finger_size_override_passes(tmp_path, capsys):
    code = main([str(_write(tmp_path, "page.yaml", OVERLAPPING)), "--finger-size", "16"])
    assert code == 0
    assert "PASSED" in capsys.readouterr().out


@pytest.fixture
def debug_logging():
    loggers = [
        logging.getLogger(name)
        for name in ("tap_audit.audit.overlap", "tap_audit.audit.tap_targets")
    ]
    saved = [(lg, lg.level, [(h, h.level) for h in lg.handlers]) for lg in loggers]
    for lg in loggers:
        lg.setLevel(logging.DEBUG)
        for handler in lg.handlers:
            handler.setLevel(logging.DEBUG)
    yield
    for lg, level, handlers in saved:
        lg.setLevel(level)
        for handler, handler_level in handlers:
            handler.setLevel(handler_level)


def test_main_json_output_stays_parseable_with_debug_logging(tmp_path, capsys, debug_logging):
    code = main([str(_write(tmp_path, "page.yaml", OVERLAPPING)), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert code == 2
    assert len(data["details"]["items"]) == 1
