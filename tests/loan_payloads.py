from __future__ import annotations

import copy


def scenario_a_payload() -> dict[str, dict[str, object]]:
    return copy.deepcopy(
        {
            "financialProfile": {
                "monthlyIncome": 60000,
                "otherObligations": 5000,
                "age": 30,
                "creditScore": 780,
                "employmentStabilityScore": 0.8,
            },
            "loanPreferences": {
                "loanAmountRequested": 2000000,
                "baseInterestRate": 9,
                "ltvRatio": 0.8,
            },
            "propertyDetails": {
                "includePlot": False,
                "plotSizeSqft": 1200,
                "floors": 2,
                "baseCostPerSqft": 1500,
                "luxuryLevel": 0.3,
                "locationScore": 0.5,
            },
        }
    )
