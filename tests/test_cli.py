import json

import pytest

from pathforms.cli import main, run_pipeline
from pathforms.config import EngineConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PATHFORMS_MAX_DEPTH", "PATHFORMS_INITIAL_STEP", "PATHFORMS_MAX_ATTEMPTS", "PATHFORMS_SEED"):
        monkeypatch.delenv(name, raising=False)


def test_run_pipeline_report():
    artifact = run_pipeline(
        EngineConfig(seed=1),
        words=["ab", "x", "aaaaaa"],
        shortest_to=["25,-50", "9,9", "0,0"],
    )
    assert artifact["graph"]["node_count"] == 485
    assert artifact["phases"] == ["build", "puzzle", "resolution", "nielsen", "validation"]
    assert artifact["validation_report"]["expected_node_count"] == 485
    resolution = artifact["resolution"]
    assert [saved["word"] for saved in resolution["saved_words"]] == ["ab", "aaaaaa", "ab"]
    assert resolution["summary"] == {"saved_count": 3, "complete_count": 2, "rejected_count": 3}
    assert {item["reason"] for item in resolution["rejected"]} == {"syntax_error", "invalid_target"}
    assert artifact["nielsen"]["n1"] is False
    assert artifact["validation_report"]["warnings"] == ["word 1 (aaaaaa) leaves the modelled region"]


def test_run_pipeline_puzzle():
    artifact = run_pipeline(EngineConfig(seed=5), puzzle=True, include_graph=True)
    assert artifact["puzzle"]["active"] is True
    assert len(artifact["puzzle"]["words"]) == 2
    assert artifact["resolution"]["summary"]["complete_count"] == 2
    assert artifact["nielsen"]["passed"] is True
    assert len(artifact["graph"]["layout"]["nodes"]) == 485


def test_main_writes_artifact(tmp_path, capsys):
    output_path = tmp_path / "report.json"
    code = main(["--word", "a", "--word", "b", "--max-depth", "3", "--output-path", str(output_path)])
    assert code == 0
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["graph"]["node_count"] == 1 + 4 * (3 ** 3 - 1) // 2
    assert payload["nielsen"]["passed"] is True
    assert "Success" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["--log-level", "LOUD"],
        ["--max-depth", "-1"],
        ["--initial-step", "0"],
    ],
)
def test_main_rejects_bad_arguments_with_usage_error(argv, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv + ["--output-path", str(tmp_path / "report.json")])
    assert excinfo.value.code == 2
    assert "error:" in capsys.readouterr().err
    assert not (tmp_path / "report.json").exists()


def test_main_accepts_lowercase_log_level(tmp_path):
    output_path = tmp_path / "report.json"
    assert main(["--log-level", "info", "--max-depth", "1", "--output-path", str(output_path)]) == 0
    assert output_path.exists()


def test_main_reports_malformed_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("PATHFORMS_MAX_DEPTH", "deep")
    with pytest.raises(SystemExit) as excinfo:
        main(["--output-path", str(tmp_path / "report.json")])
    assert excinfo.value.code == 2
