from pathlib import Path

import pytest

from infrastructure.config import RetagMode, load_run_config


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "retag.yaml"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RETAG_DATA_DIR", raising=False)
    monkeypatch.delenv("RETAG_OUTPUT_ROOT", raising=False)


def test_load_full_config(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "mode: autotag\n"
        "data_dir: exports\n"
        "input_file: films.json\n"
        "columns:\n"
        "  tags_col: keywords\n"
        "merge:\n"
        "  max_tags: 4\n"
        "  only_untagged: true\n",
    )

    cfg = load_run_config(path)

    assert cfg.mode is RetagMode.AUTOTAG
    assert cfg.input_file_path == Path("exports") / "films.json"
    assert cfg.columns.tags_col == "keywords"
    assert cfg.columns.title_col == "title"
    assert cfg.merge.max_tags == 4
    assert cfg.merge.auto_tag_limit == 4
    assert cfg.merge.only_untagged is True
    assert cfg.dry_run is False


def test_environment_overrides_directories(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path, "input_file: entries.csv\ndata_dir: ignored\n")
    monkeypatch.setenv("RETAG_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("RETAG_OUTPUT_ROOT", str(tmp_path / "out"))

    cfg = load_run_config(path)

    assert cfg.input_file_path == tmp_path / "data" / "entries.csv"
    assert cfg.output_root == tmp_path / "out"


def test_missing_input_file_key(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="input_file"):
        load_run_config(_write(tmp_path, "mode: full\n"))


def test_invalid_mode(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Invalid mode"):
        load_run_config(_write(tmp_path, "mode: everything\ninput_file: entries.csv\n"))


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_run_config(tmp_path / "nope.yaml")


def test_non_mapping_yaml(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_run_config(_write(tmp_path, "- just\n- a list\n"))
