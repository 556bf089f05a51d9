from fastapi.testclient import TestClient

from homeloan.api.app import app
from homeloan.domain.construction.estimator import (
    EstimatorRequest,
    estimate_construction_budget,
)


def test_defaults_apply_to_missing_inputs() -> None:
    budget = estimate_construction_budget(EstimatorRequest())

    assert budget.area == 1000
    assert budget.materials["Cement"].quantity == "450 Bags"
    assert budget.materials["Cement"].cost == 450 * 395
    assert budget.materials["Steel"].quantity == "4000 Kg"
    assert budget.materials["Doors/Windows"].quantity == "Lump Sum"
    assert budget.services == {}
    assert budget.total_services == 0


def test_doors_scale_with_area() -> None:
    budget = estimate_construction_budget(EstimatorRequest(plotSize=1000))

    doors = 35000 + 4 * 10000
    windows = 1000 * 0.12 * 650
    assert abs(budget.materials["Doors/Windows"].cost - (doors + windows)) < 1e-6


def test_tax_and_standard_contingency() -> None:
    budget = estimate_construction_budget(EstimatorRequest(plotSize=1500, floors=2))
    subtotal = budget.total_material + budget.total_services

    assert budget.area == 3000
    assert abs(budget.gst - subtotal * 0.18) < 1e-6
    assert abs(budget.contingency - subtotal * 0.05) < 1e-6
    expected_total = subtotal + budget.gst + budget.contingency
    assert abs(budget.final_budget - expected_total) < 1e-6
    assert abs(budget.cost_sqft - budget.final_budget / 3000) < 1e-9


def test_premium_or_tier_one_raises_contingency() -> None:
    premium = estimate_construction_budget(EstimatorRequest(quality="Premium"))
    tier_one = estimate_construction_budget(EstimatorRequest(tier="Tier 1"))

    for budget in (premium, tier_one):
        subtotal = budget.total_material + budget.total_services
        assert abs(budget.contingency - subtotal * 0.1) < 1e-6


def test_unknown_tier_falls_back_to_tier_two() -> None:
    unknown = estimate_construction_budget(EstimatorRequest(tier="Tier 9"))
    tier_two = estimate_construction_budget(EstimatorRequest(tier="Tier 2"))

    assert unknown.to_dict() == tier_two.to_dict()


def test_selected_services_are_itemised() -> None:
    budget = estimate_construction_budget(
        EstimatorRequest(inc_labor=True, inc_architect=True, tier="Tier 3")
    )

    assert budget.services == {"Civil Labor": 300000, "Architect": 60000}
    assert budget.total_services == 360000


def test_calculate_endpoint_returns_breakdown() -> None:
    response = TestClient(app).post(
        "/api/estimator/calculate",
        json={
            "plotSize": "1200",
            "floors": 2,
            "quality": "Basic",
            "inc_plumbing": True,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["area"] == 2400
    assert body["data"]["services"] == {"Plumbing": 2400 * 120}
    assert body["data"]["materials"]["Cement"] == {"q": "1080 Bags", "c": 1080 * 395}


def test_calculate_endpoint_rejects_non_object_body() -> None:
    response = TestClient(app).post("/api/estimator/calculate", json=[1, 2, 3])

    assert response.status_code == 400
    assert response.json()["error"]["type"] == "HTTP_ERROR"


def test_service_flags_follow_truthiness() -> None:
    request = EstimatorRequest(inc_labor="yes", inc_plumbing=5, inc_electrical=0)

    assert request.inc_labor is True
    assert request.inc_plumbing is True
    assert request.inc_electrical is False
    assert request.inc_architect is False


def test_calculate_endpoint_accepts_truthy_flags() -> None:
    response = TestClient(app).post(
        "/api/estimator/calculate",
        json={"plotSize": 1000, "inc_labor": "abc", "inc_architect": 1},
    )

    assert response.status_code == 200
    assert response.json()["data"]["services"] == {
        "Civil Labor": 350000,
        "Architect": 60000,
    }


def test_calculate_endpoint_survives_overflowing_area() -> None:
    response = TestClient(app).post(
        "/api/estimator/calculate",
        json={"plotSize": 1e200, "floors": 1e200},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["area"] is None
    assert data["final_budget"] is None
    assert data["cost_sqft"] is None
    assert data["materials"]["Cement"] == {"q": "Infinity Bags", "c": None}
