"""CLI tests: subcommands end to end against a catalog file."""

import json
from pathlib import Path

import pytest

from listing_recs.cli.main import main


class TestSimilarCommand:
    def test_similar_outputs_ranked_json(self, catalog_file: Path, capsys) -> None:
        main(["similar", "--catalog", str(catalog_file), "--listing", "x", "--limit", "2"])
        results = json.loads(capsys.readouterr().out)
        assert [r["listing"]["id"] for r in results] == ["y", "z"]
        assert "breakdown" not in results[0]

    def test_similar_explain(self, catalog_file: Path, capsys) -> None:
        main(["similar", "--catalog", str(catalog_file), "--listing", "x", "--explain"])
        results = json.loads(capsys.readouterr().out)
        assert results[0]["breakdown"]["type"] == 1.0

    def test_unknown_listing_exits(self, catalog_file: Path) -> None:
        with pytest.raises(SystemExit):
            main(["similar", "--catalog", str(catalog_file), "--listing", "missing"])

    def test_output_file(self, catalog_file: Path, tmp_path: Path, capsys) -> None:
        out = tmp_path / "similar.json"
        main(["similar", "--catalog", str(catalog_file), "--listing", "x", "--output", str(out)])
        assert "wrote to" in capsys.readouterr().out
        assert len(json.loads(out.read_text(encoding="utf-8"))) == 2


class TestRecommendCommand:
    def test_no_history_is_popularity(self, catalog_file: Path, capsys) -> None:
        main(["recommend", "--catalog", str(catalog_file)])
        results = json.loads(capsys.readouterr().out)
        assert results[0]["id"] == "z"

    def test_with_history(self, catalog_file: Path, capsys) -> None:
        main(["recommend", "--catalog", str(catalog_file), "--history", "y", "--exclude-history"])
        results = json.loads(capsys.readouterr().out)
        assert [r["id"] for r in results] == ["x", "z"]


class TestPredictPriceCommand:
    def test_fallback_price(self, catalog_file: Path, capsys) -> None:
        main(
            [
                "predict-price",
                "--catalog",
                str(catalog_file),
                "--type",
                "BUNGALOW",
                "--city",
                "Đà Lạt",
                "--base-price",
                "2750000",
            ]
        )
        result = json.loads(capsys.readouterr().out)
        assert result["predicted_price"] == 2_750_000
        assert result["used_fallback"] is True

    def test_config_file(self, catalog_file: Path, tmp_path: Path, capsys) -> None:
        config = tmp_path / "engine.yaml"
        config.write_text("policy:\n  default_price: 800000\n")
        main(
            [
                "--config",
                str(config),
                "predict-price",
                "--catalog",
                str(catalog_file),
                "--type",
                "BUNGALOW",
                "--city",
                "Huế",
            ]
        )
        assert json.loads(capsys.readouterr().out)["predicted_price"] == 800_000

    def test_bad_config_exits(self, catalog_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "engine.yaml"
        config.write_text("weights:\n  type: 0.9\n")
        with pytest.raises(SystemExit):
            main(["--config", str(config), "similar", "--catalog", str(catalog_file), "--listing", "x"])
