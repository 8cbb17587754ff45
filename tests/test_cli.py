"""Tests for the pickingtrainer command line."""

import json

import pytest

from pickingtrainer.cli.trainer_cmd import main
from pickingtrainer.config import settings


@pytest.fixture(autouse=True)
def no_logging_setup(mocker):
    return mocker.patch("pickingtrainer.cli.trainer_cmd.setup_logging")


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "trainer.db")


@pytest.fixture
def products_file(tmp_path, sample_products):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(sample_products, ensure_ascii=False), encoding="utf-8")
    return str(path)


def test_import_and_list_products(db_path, products_file, capsys) -> None:
    main(["--db", db_path, "import", products_file])
    main(["--db", db_path, "products"])

    out = capsys.readouterr().out
    assert "5 件の商品を登録しました。" in out
    assert "A001  ミネラルウォーター [1-01]  在庫 5" in out
    assert "B001  ポテトチップス [2-01]  在庫 99" in out
    assert "B002  チョコレート [2-02]  在庫切れ" in out


def test_import_missing_file_exits(db_path, tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--db", db_path, "import", str(tmp_path / "missing.json")])
    assert exc_info.value.code == 1
    assert "エラー" in capsys.readouterr().err


def test_import_bad_file_exits(db_path, tmp_path, capsys) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"items": []}', encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["--db", db_path, "import", str(path)])
    assert "商品リストが見つかりません" in capsys.readouterr().err


def test_tasks_without_products(db_path, capsys) -> None:
    main(["--db", db_path, "tasks"])
    assert "商品マスタが空です" in capsys.readouterr().out


def test_tasks(db_path, products_file, capsys) -> None:
    main(["--db", db_path, "import", products_file])
    main(["--db", db_path, "tasks", "--count", "4", "--seed", "1"])
    out = capsys.readouterr().out
    assert "=== 練習タスク (4 件) ===" in out
    assert "B002" not in out


def test_slips_with_images(db_path, products_file, tmp_path, capsys) -> None:
    image_dir = tmp_path / "images"
    main(["--db", db_path, "import", products_file])
    main([
        "--db", db_path, "slips", "--count", "2", "--items", "2",
        "--seed", "3", "--image-dir", str(image_dir),
    ])

    out = capsys.readouterr().out
    assert "【伝票 No.1】" in out
    assert "【伝票 No.2】" in out
    assert "合計: 2 枚 / 4 品目" in out
    assert (image_dir / "slip_1.png").exists()
    assert (image_dir / "slip_2.png").exists()


def test_slips_image_dir_defaults_to_setting(db_path, products_file, tmp_path, mocker, capsys) -> None:
    image_dir = tmp_path / "default-images"
    mocker.patch.object(settings, "TRAINER_IMAGE_DIR", str(image_dir))
    main(["--db", db_path, "import", products_file])
    main(["--db", db_path, "slips", "--count", "1", "--items", "1", "--image-dir"])

    assert (image_dir / "slip_1.png").exists()
    assert "画像保存" in capsys.readouterr().out


def test_slips_without_image_dir_saves_nothing(db_path, products_file, tmp_path, mocker, capsys) -> None:
    image_dir = tmp_path / "default-images"
    mocker.patch.object(settings, "TRAINER_IMAGE_DIR", str(image_dir))
    main(["--db", db_path, "import", products_file])
    main(["--db", db_path, "slips", "--count", "1", "--items", "1"])

    assert not image_dir.exists()
    assert "画像保存" not in capsys.readouterr().out


def test_record_keeps_integer_and_decimal_scores(db_path, capsys) -> None:
    main(["--db", db_path, "record", "--user", "u1", "--score", "80"])
    main(["--db", db_path, "record", "--user", "u1", "--score", "72.5"])
    out = capsys.readouterr().out
    assert "スコア 80\n" in out
    assert "スコア 72.5\n" in out


def test_record_and_history(db_path, capsys) -> None:
    main(["--db", db_path, "record", "--user", "u1", "--score", "80", "--total", "10", "--duration-ms", "65000"])
    main(["--db", db_path, "record", "--user", "u1", "--score", "70", "--total", "10"])
    main([
        "--db", db_path, "record", "--user", "u1", "--mode", "timeAttack",
        "--score", "50", "--total", "12", "--time-limit", "60",
    ])
    out = capsys.readouterr().out
    assert out.count("自己ベスト更新!") == 2

    main(["--db", db_path, "history", "--user", "u1"])
    out = capsys.readouterr().out
    assert "=== 練習履歴 (3 件) ===" in out
    assert "時間 1分5秒" in out
    assert "制限60秒" in out
    assert "【自己ベスト: u1】" in out
    assert "normal: 80\n" in out
    assert "normal: 80.0" not in out
    assert "timeAttack:60: 12" in out


def test_history_empty(db_path, capsys) -> None:
    main(["--db", db_path, "history"])
    assert "履歴はありません。" in capsys.readouterr().out


def test_no_command_prints_help(db_path, capsys) -> None:
    main(["--db", db_path])
    assert "usage" in capsys.readouterr().out


def test_verbose_enables_debug_logging(db_path, no_logging_setup) -> None:
    main(["--db", db_path, "-v", "history"])
    no_logging_setup.assert_called_once_with("DEBUG")
