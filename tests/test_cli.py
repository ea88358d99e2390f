import io

import pytest

from cart_pricing import cli
from cart_pricing.models.pricing import BracketScheme


class TestParseOrders:
    def test_parses_names_and_prices(self):
        items = cli.parse_orders(["2\n", "1 30\n", "7 5\n"])
        assert [(item.name, item.unit_price) for item in items] == [
            ("Order-1", 30),
            ("Order-7", 5),
        ]

    def test_custom_prefix(self):
        items = cli.parse_orders(["1", "3 12"], name_prefix="Item-")
        assert items[0].name == "Item-3"

    def test_extra_whitespace_tolerated(self):
        items = cli.parse_orders(["  1  \n", "  4   9  \n"])
        assert items[0].unit_price == 9

    def test_zero_orders(self):
        assert cli.parse_orders(["0\n"]) == []

    @pytest.mark.parametrize(
        "lines",
        [
            [],
            ["two\n"],
            ["1\n", "1 abc\n"],
            ["1\n", "1\n"],
            ["2\n", "1 5\n"],
            ["1\n", "1 -5\n"],
        ],
    )
    def test_malformed_input_raises(self, lines):
        with pytest.raises(ValueError):
            cli.parse_orders(lines)


class TestRun:
    def test_report_output(self, settings):
        source = io.StringIO("3\n1 30\n2 5\n1 30\n")
        sink = io.StringIO()

        total = cli.run(source, sink, settings)

        assert total == 59
        assert sink.getvalue().splitlines() == [
            "Total Amount: 59",
            "Cheap Category Discount: 6",
            "Order-1 (2 items)",
            "Order-2 (1 items)",
        ]

    def test_no_category_lines_when_nothing_credited(self, settings):
        sink = io.StringIO()
        cli.run(io.StringIO("2\n1 10\n1 10\n"), sink, settings)
        assert sink.getvalue().splitlines() == [
            "Total Amount: 20",
            "Order-1 (2 items)",
        ]

    def test_tiered_scheme(self, settings):
        settings = settings.model_copy(update={"bracket_scheme": BracketScheme.TIERED})
        sink = io.StringIO()
        cli.run(io.StringIO("2\n1 15\n2 25\n"), sink, settings)
        assert sink.getvalue().splitlines() == [
            "Total Amount: 30",
            "Moderate Category Discount: 3",
            "Expensive Category Discount: 7",
            "Order-1 (1 items)",
            "Order-2 (1 items)",
        ]


class TestMain:
    def test_reads_input_file(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setattr(cli, "get_settings", lambda: cli.Settings(_env_file=None))
        orders = tmp_path / "orders.txt"
        orders.write_text("1\n5 15\n")

        cli.main(["--input", str(orders)])

        assert capsys.readouterr().out.splitlines() == [
            "Total Amount: 14",
            "Cheap Category Discount: 1",
            "Order-5 (1 items)",
        ]

    def test_scheme_flag(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setattr(cli, "get_settings", lambda: cli.Settings(_env_file=None))
        orders = tmp_path / "orders.txt"
        orders.write_text("1\n5 15\n")

        cli.main(["--input", str(orders), "--scheme", "tiered"])

        assert capsys.readouterr().out.splitlines()[0] == "Total Amount: 12"

    def test_rejects_unknown_scheme(self):
        with pytest.raises(SystemExit):
            cli.main(["--scheme", "bogus"])
