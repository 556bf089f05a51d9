from __future__ import annotations

from dataclasses import dataclass

from homeloan.domain.loan.inputs import FinancialProfile, NormalizedLoanInput

MIN_CREDIT_SCORE = 650
CREDIT_SCORE_REJECTION_REASON = "Credit score below minimum threshold"

FOIR_MIN = 0.3
FOIR_MAX = 0.6
RISK_FACTOR_MIN = 0.6
RISK_FACTOR_MAX = 1.1
INTEREST_RATE_FLOOR = 5.0
LUXURY_MULTIPLIER_RANGE = (0.8, 1.4)
LOCATION_MULTIPLIER_RANGE = (0.9, 1.5)


@dataclass(frozen=True)
class InterpretedProfile:
    foir: float
    risk_factor: float
    adjusted_interest_rate: float
    luxury_multiplier: float
    location_multiplier: float
    max_tenure_years: int
    requested_tenure_years: float
    ltv_ratio: float


@dataclass(frozen=True)
class ProfileRejection:
    rejection_reason: str
    rejected: bool = True


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def derive_foir(profile: FinancialProfile) -> float:
    if profile.monthly_income < 25000:
        base_foir = 0.42
    elif profile.monthly_income < 50000:
        base_foir = 0.47
    else:
        base_foir = 0.52

    credit_adj = 0
    if profile.credit_score >= 800:
        credit_adj += 0.03
    elif profile.credit_score >= 750:
        credit_adj += 0.02
    elif profile.credit_score >= 700:
        credit_adj += 0.0
    elif profile.credit_score >= 650:
        credit_adj -= 0.02
    else:
        credit_adj -= 0.05

    stability_adj = (profile.employment_stability_score - 0.5) * 0.1

    foir = base_foir + credit_adj + stability_adj
    return _clamp(foir, FOIR_MIN, FOIR_MAX)


def derive_risk_factor(profile: FinancialProfile) -> float:
    if profile.credit_score >= 820:
        risk = 1.05
    elif profile.credit_score >= 760:
        risk = 1.0
    elif profile.credit_score >= 700:
        risk = 0.9
    elif profile.credit_score >= 650:
        risk = 0.8
    else:
        risk = 0.7

    risk += (profile.employment_stability_score - 0.5) * 0.6
    return _clamp(risk, RISK_FACTOR_MIN, RISK_FACTOR_MAX)


def derive_adjusted_interest_rate(
    base_interest_rate: float, profile: FinancialProfile
) -> float:
    spread = 0
    if profile.credit_score >= 820:
        spread -= 0.3
    elif profile.credit_score >= 760:
        spread -= 0.1
    elif profile.credit_score >= 700:
        spread += 0.1
    elif profile.credit_score >= 650:
        spread += 0.3
    else:
        spread += 0.6

    spread += (0.5 - profile.employment_stability_score) * 0.6
    return max(INTEREST_RATE_FLOOR, base_interest_rate + spread)


def derive_luxury_multiplier(luxury_level: float) -> float:
    low, high = LUXURY_MULTIPLIER_RANGE
    return low + (high - low) * luxury_level


def derive_location_multiplier(location_score: float) -> float:
    low, high = LOCATION_MULTIPLIER_RANGE
    return low + (high - low) * location_score


def interpret_profile(
    normalized: NormalizedLoanInput,
) -> InterpretedProfile | ProfileRejection:
    profile = normalized.financial_profile
    preferences = normalized.loan_preferences
    property_details = normalized.property_details

    if profile.credit_score < MIN_CREDIT_SCORE:
        return ProfileRejection(rejection_reason=CREDIT_SCORE_REJECTION_REASON)

    return InterpretedProfile(
        foir=derive_foir(profile),
        risk_factor=derive_risk_factor(profile),
        adjusted_interest_rate=derive_adjusted_interest_rate(
            preferences.base_interest_rate, profile
        ),
        luxury_multiplier=derive_luxury_multiplier(property_details.luxury_level),
        location_multiplier=derive_location_multiplier(
            property_details.location_score
        ),
        max_tenure_years=normalized.system_derived.max_tenure_years,
        requested_tenure_years=preferences.desired_tenure_years,
        ltv_ratio=preferences.ltv_ratio,
    )
