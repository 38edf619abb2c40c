"""Wire format of money fields."""

from decimal import Decimal

from erp_api.modules.financial.schemas import LedgerSummary


def test_money_serializes_as_exact_decimal_string():
    summary = LedgerSummary(
        credits=Decimal("12345678901234567.89"),
        debits=Decimal("0.10"),
        balance=Decimal("12345678901234567.79"),
        entries=2
    )

    body = summary.model_dump(mode="json", by_alias=True)

    assert body["credits"] == "12345678901234567.89"
    assert body["debits"] == "0.10"
    assert body["balance"] == "12345678901234567.79"


def test_money_stays_decimal_in_python_mode():
    summary = LedgerSummary(credits=Decimal("1.50"), debits=Decimal("0"), balance=Decimal("1.50"), entries=1)
    assert summary.model_dump()["credits"] == Decimal("1.50")
