"""Integration tests for the command-line interface."""

import asyncio
import json

import pytest
import yaml

from stylist.cli import main, parse_args


class TestParseArgs:
    """Test argument parsing."""

    def test_suggest_defaults(self):
        args = parse_args(["suggest"])

        assert args.command == "suggest"
        assert args.product is None
        assert args.cart is None
        assert not args.offline

    def test_suggest_options(self):
        args = parse_args(["--log-level", "DEBUG", "suggest", "--product", "sku001", "--cart", "sku005", "sku003", "--offline", "--json"])

        assert args.log_level == "DEBUG"
        assert args.product == "sku001"
        assert args.cart == ["sku005", "sku003"]
        assert args.offline and args.json

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestMain:
    """Test CLI runs against the bundled catalog."""

    def test_suggest_json(self, capsys):
        exit_code = asyncio.run(main(["suggest", "--offline", "--json"]))

        out = capsys.readouterr().out
        payload = json.loads(out[out.index("{"):])
        assert exit_code == 0
        assert payload["suggestedProductId"] == "sku001"
        assert payload["product"]["name"] == "Black T-Shirt"
        assert payload["styleTags"] == ["casual"]
        assert payload["source"] == "heuristic"

    def test_suggest_summary(self, capsys):
        exit_code = asyncio.run(main(["suggest", "--product", "sku006", "--offline"]))

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "STYLIST SUGGESTION" in out
        assert "Navy Chinos (sku004)" in out
        assert "formal" in out

    def test_seed_cart_from_config(self, tmp_path, capsys):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"cart": {"seed_product_ids": ["sku001"]}}))

        exit_code = asyncio.run(main(["--config", str(config_file), "suggest", "--offline", "--json"]))

        out = capsys.readouterr().out
        payload = json.loads(out[out.index("{"):])
        assert exit_code == 0
        # Blue jeans + black tee already make an outfit
        assert payload["suggestedProductId"] == "sku001"

    def test_unknown_product(self, capsys):
        exit_code = asyncio.run(main(["suggest", "--product", "sku404", "--offline"]))

        assert exit_code == 1
        assert "No suggestion" in capsys.readouterr().out

    def test_unknown_cart_product(self, capsys):
        exit_code = asyncio.run(main(["suggest", "--cart", "sku404", "--offline"]))

        assert exit_code == 1
        assert "PRODUCT_NOT_FOUND" in capsys.readouterr().out

    def test_missing_config_file(self, tmp_path, capsys):
        exit_code = asyncio.run(main(["--config", str(tmp_path / "nope.yaml"), "catalog"]))

        assert exit_code == 1
        assert "CONFIG_FILE_NOT_FOUND" in capsys.readouterr().out

    def test_invalid_config_file(self, tmp_path, capsys):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"llm": {"temperature": 5}}))

        exit_code = asyncio.run(main(["--config", str(config_file), "catalog"]))

        assert exit_code == 1
        assert "Invalid configuration" in capsys.readouterr().out

    def test_catalog_listing(self, capsys):
        exit_code = asyncio.run(main(["catalog"]))

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "sku789" in out
        assert "Blue Slim Jeans" in out
        assert len(out.strip().splitlines()) == 8

    def test_custom_catalog_file(self, tmp_path, capsys):
        catalog_file = tmp_path / "catalog.json"
        catalog_file.write_text(json.dumps([
            {"id": "a1", "name": "Olive Shorts", "category": "shorts", "color": "olive", "fit": "regular", "price": 25},
            {"id": "a2", "name": "Cream Shirt", "category": "shirt", "color": "beige", "fit": "regular", "price": 40},
        ]))

        exit_code = asyncio.run(main(["--catalog", str(catalog_file), "suggest", "--product", "a1", "--offline", "--json"]))

        out = capsys.readouterr().out
        assert exit_code == 0
        assert json.loads(out[out.index("{"):])["suggestedProductId"] == "a2"
