"""Tests for report generation and formatting."""

from decimal import Decimal

from finance_tracker.accounts import Account
from finance_tracker.models.audit import AuditEventType
from finance_tracker.models.transaction import Expense, Income
from finance_tracker.reports import (
    ReportGenerator,
    format_all_time_report,
    format_menu,
    format_money,
    format_monthly_report,
)


class TestMonthlyReport:
    """Tests for generate_monthly_report."""

    def test_scenario_month(self, scenario_account, report_generator):
        """Test January of the reference scenario."""
        summary = report_generator.generate_monthly_report(scenario_account, "01-2024")
        assert summary.month_key == "01-2024"
        assert summary.total_income == Decimal("1000")
        assert summary.total_expense == Decimal("200")
        assert summary.net == Decimal("800")
        assert summary.by_category_income == {"Salary": Decimal("1000")}
        assert summary.by_category_expense == {"Food": Decimal("200")}
        assert summary.transaction_count == 2

    def test_category_sums_are_additive(self, report_generator):
        """Test two same-category expenses in a month are summed."""
        acc = Account()
        acc.add_transaction(Expense(amount=Decimal("50"), category="Food", date="03-05-2024"))
        acc.add_transaction(Expense(amount=Decimal("30"), category="Food", date="28-05-2024"))
        summary = report_generator.generate_monthly_report(acc, "05-2024")
        assert summary.by_category_expense["Food"] == Decimal("80")

    def test_category_tracked_separately_per_kind(self, report_generator):
        """Test a category used for both kinds lands in both mappings."""
        acc = Account()
        acc.add_transaction(Income(amount=Decimal("20"), category="Refund", date="01-06-2024"))
        acc.add_transaction(Expense(amount=Decimal("5"), category="Refund", date="02-06-2024"))
        summary = report_generator.generate_monthly_report(acc, "06-2024")
        assert summary.by_category_income == {"Refund": Decimal("20")}
        assert summary.by_category_expense == {"Refund": Decimal("5")}
        assert summary.net == Decimal("15")

    def test_categories_are_not_normalised(self, report_generator):
        """Test category names are case-sensitive."""
        acc = Account()
        acc.add_transaction(Expense(amount=Decimal("1"), category="Food", date="01-07-2024"))
        acc.add_transaction(Expense(amount=Decimal("2"), category="food", date="01-07-2024"))
        summary = report_generator.generate_monthly_report(acc, "07-2024")
        assert summary.by_category_expense == {"Food": Decimal("1"), "food": Decimal("2")}

    def test_empty_month(self, scenario_account, report_generator):
        """Test a month with no entries yields zeros."""
        summary = report_generator.generate_monthly_report(scenario_account, "12-2030")
        assert summary.total_income == 0
        assert summary.total_expense == 0
        assert summary.net == 0
        assert summary.by_category_income == {}
        assert summary.is_empty is True

    def test_report_is_idempotent(self, scenario_account, report_generator):
        """Test repeated reports with no mutation are identical."""
        first = report_generator.generate_monthly_report(scenario_account, "01-2024")
        second = report_generator.generate_monthly_report(scenario_account, "01-2024")
        assert first == second

    def test_report_reflects_new_transactions(self, scenario_account, report_generator):
        """Test nothing is cached between calls."""
        before = report_generator.generate_monthly_report(scenario_account, "02-2024")
        scenario_account.add_transaction(Income(amount=Decimal("10"), category="Gift", date="14-02-2024"))
        after = report_generator.generate_monthly_report(scenario_account, "02-2024")
        assert before.total_income == 0
        assert after.total_income == Decimal("10")


class TestAllTimeReport:
    """Tests for generate_all_time_report."""

    def test_scenario_totals(self, scenario_account, report_generator):
        """Test totals across all months."""
        summary = report_generator.generate_all_time_report(scenario_account)
        assert summary.income == Decimal("1000")
        assert summary.expense == Decimal("250")
        assert summary.net == Decimal("750")
        assert summary.transaction_count == 3

    def test_net_matches_balance(self, scenario_account, report_generator):
        """Test all-time net equals the account balance."""
        summary = report_generator.generate_all_time_report(scenario_account)
        assert summary.net == scenario_account.balance

    def test_empty_account(self, report_generator):
        """Test an empty ledger."""
        summary = report_generator.generate_all_time_report(Account())
        assert summary.income == 0
        assert summary.expense == 0
        assert summary.net == 0

    def test_report_is_idempotent(self, scenario_account, report_generator):
        """Test repeated all-time reports are identical."""
        assert (
            report_generator.generate_all_time_report(scenario_account)
            == report_generator.generate_all_time_report(scenario_account)
        )


class TestReportAudit:
    """Tests for audit events emitted while reporting."""

    def test_reports_are_audited(self, scenario_account, audit_logger):
        """Test both report kinds record an event."""
        generator = ReportGenerator(audit_logger=audit_logger)
        generator.generate_monthly_report(scenario_account, "01-2024")
        generator.generate_all_time_report(scenario_account)

        assert [event.event_type for event in audit_logger.events] == [
            AuditEventType.MONTHLY_REPORT_GENERATED,
            AuditEventType.ALL_TIME_REPORT_GENERATED,
        ]
        assert audit_logger.events[0].details["transaction_count"] == 2

    def test_long_month_query_is_audited(self, scenario_account, audit_logger):
        """Test a very long month query returns an empty summary and is recorded."""
        generator = ReportGenerator(audit_logger=audit_logger)
        query = "1" * 600
        summary = generator.generate_monthly_report(scenario_account, query)

        assert summary.total_income == Decimal("0")
        assert summary.total_expense == Decimal("0")
        assert audit_logger.events[0].event_type == AuditEventType.MONTHLY_REPORT_GENERATED
        assert audit_logger.events[0].details["month_key"] == query


class TestFormatting:
    """Tests for text rendering."""

    def test_format_money(self, settings):
        """Test currency symbol and precision."""
        assert format_money(Decimal("750"), settings) == "Rs.750.00"
        assert format_money(Decimal("1234.5"), settings) == "Rs.1,234.50"

    def test_monthly_report_text(self, scenario_account, report_generator, settings):
        """Test the monthly report lists totals, categories and balance."""
        summary = report_generator.generate_monthly_report(scenario_account, "01-2024")
        text = format_monthly_report(summary, scenario_account.balance, settings)
        assert "===== Monthly Report (01-2024) =====" in text
        assert "Total Income : 1,000.00" in text
        assert "Net Savings  : 800.00" in text
        assert "  Salary: 1,000.00" in text
        assert "  Food: 200.00" in text
        assert text.endswith("Current Balance: Rs.750.00")

    def test_monthly_report_empty_categories(self, report_generator, settings):
        """Test empty category sections print None."""
        summary = report_generator.generate_monthly_report(Account(), "01-2024")
        text = format_monthly_report(summary, Decimal("0"), settings)
        assert text.count("\nNone") == 2

    def test_all_time_report_text(self, scenario_account, report_generator, settings):
        """Test the all-time summary text."""
        summary = report_generator.generate_all_time_report(scenario_account)
        text = format_all_time_report(summary, settings)
        assert "===== All-Time Summary =====" in text
        assert "Total Expense: 250.00" in text
        assert "Net Savings  : 750.00" in text

    def test_menu_shows_balance(self, settings):
        """Test the menu header includes the balance and options."""
        text = format_menu(Decimal("-12.5"), settings)
        assert "Current Balance: Rs.-12.50" in text
        assert "5. Exit" in text
