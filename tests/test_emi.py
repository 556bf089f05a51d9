import math

from homeloan.domain.loan.emi import (
    annual_rate_to_monthly,
    compute_emi,
    compute_principal_from_emi,
    compute_totals,
    tenure_to_installments,
)


def test_annual_rate_to_monthly() -> None:
    assert annual_rate_to_monthly(12) == 0.12 / 12
    assert annual_rate_to_monthly(0) == 0


def test_tenure_to_installments_rounds_half_up() -> None:
    assert tenure_to_installments(30) == 360
    assert tenure_to_installments(0.875) == 11
    assert tenure_to_installments(0) == 0


def test_compute_emi_standard_amortisation() -> None:
    emi = compute_emi(100000, 12, 1)

    assert abs(emi - 8884.8789) < 0.001


def test_compute_emi_uses_reference_operation_order() -> None:
    principal, rate, years = 3386880.0, 8.72, 30
    r = (rate / 100) / 12
    growth = math.pow(1 + r, 360)

    assert compute_emi(principal, rate, years) == (principal * r * growth) / (
        growth - 1
    )


def test_compute_emi_non_positive_principal_is_zero() -> None:
    assert compute_emi(0, 9, 20) == 0
    assert compute_emi(-5000, 9, 20) == 0


def test_compute_emi_zero_rate_or_zero_tenure() -> None:
    assert compute_emi(120000, 0, 10) == 1000.0
    assert compute_emi(5000, 9, 0) == 5000


def test_compute_principal_from_emi_zero_rate_or_zero_tenure() -> None:
    assert compute_principal_from_emi(1000, 0, 10) == 120000
    assert compute_principal_from_emi(1000, 9, 0) == 0


def test_principal_and_emi_are_inverse_operations() -> None:
    for principal in (50000.0, 1250000.0, 7500000.0):
        for rate in (5.0, 8.72, 13.5):
            for years in (1, 12.5, 30):
                emi = compute_emi(principal, rate, years)
                recovered = compute_principal_from_emi(emi, rate, years)
                assert abs(recovered - principal) <= principal * 1e-9


def test_compute_totals() -> None:
    totals = compute_totals(1000, 100, 9, 1)

    assert totals.total_repayment == 1200
    assert totals.total_interest == 200
