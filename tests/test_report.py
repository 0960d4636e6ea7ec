from decimal import Decimal

from salesdesk import report
from salesdesk.engine import record_sale, summarize
from salesdesk.models import Seller
from salesdesk.seed_data import default_catalog


def make_seller_with_sales() -> Seller:
    catalog = default_catalog()
    seller = Seller(name="Ana", id=123)
    record_sale(seller, catalog.lookup("P1"), 2)
    record_sale(seller, catalog.lookup("P2"), 1)
    return seller


class TestCatalogTable:
    def test_header_and_rows(self):
        lines = report.render_catalog(default_catalog())
        assert lines[2] == f"{'Code':<10} {'Description':<20} {'Unit Price':<20}"
        assert lines[3] == report.CATALOG_RULE
        assert lines[4].startswith("P1         Café")
        assert "$ 8.500,00" in lines[4]
        assert len(lines) == 4 + 5

    def test_custom_money_formatter(self):
        lines = report.render_catalog(default_catalog(), money=lambda v: f"{v} COP")
        assert lines[4].rstrip().endswith("8500 COP")


class TestSellerList:
    def test_lists_name_and_id(self):
        lines = report.render_sellers([Seller(name="Ana", id=123), Seller(name="Luis", id=456)])
        assert lines[-2:] == ["- Ana (123)", "- Luis (456)"]


class TestSummaryTable:
    def test_rows_and_totals(self):
        lines = report.render_summary(summarize(make_seller_with_sales()))
        assert " Seller: Ana | ID: 123" in lines
        assert lines[3].split() == ["Product", "Code", "Quantity", "Total", "Value"]
        assert lines[5].split()[:3] == ["Café", "P1", "2"]
        assert lines[5].rstrip().endswith("$ 17.000,00")
        assert lines[-1] == "Total sold: 3 items | Total value: $ 21.200,00"

    def test_no_sales_notice_instead_of_table(self):
        lines = report.render_summary(summarize(Seller(name="Ana", id=123)))
        assert lines[-1] == "   (No sales recorded)"
        assert report.SUMMARY_RULE not in lines
        assert not any(line.startswith("Total sold") for line in lines)

    def test_totals_use_formatter(self):
        summary = summarize(make_seller_with_sales())
        lines = report.render_summary(summary, money=lambda v: str(v))
        assert summary.total_value == Decimal("21200")
        assert lines[-1] == "Total sold: 3 items | Total value: 21200"
