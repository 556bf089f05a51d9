"""Material-level construction budget for a plot.

Rates are indicative market figures per city tier; finishing items scale with
the requested build quality.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from homeloan.domain.numbers import format_number, json_number, round_half_up

TIERS = ("Tier 1", "Tier 2", "Tier 3")
DEFAULT_TIER = "Tier 2"
DEFAULT_PLOT_SIZE_SQFT = 1000.0
DEFAULT_FLOORS = 1
COVERAGE_RATIO = 1.0
GST_RATE = 0.18

TIERED_RATES: dict[str, dict[str, float]] = {
    "cement": {"Tier 1": 415, "Tier 2": 395, "Tier 3": 385},
    "steel": {"Tier 1": 72.5, "Tier 2": 67.5, "Tier 3": 65},
    "sand": {"Tier 1": 55, "Tier 2": 48, "Tier 3": 42},
    "aggregate": {"Tier 1": 50, "Tier 2": 45, "Tier 3": 42},
    "bricks": {"Tier 1": 9, "Tier 2": 8, "Tier 3": 7},
    "labor": {"Tier 1": 400, "Tier 2": 350, "Tier 3": 300},
}
FLAT_RATES: dict[str, float] = {
    "flooring": 150,
    "paint_liter": 250,
    "door_main": 35000,
    "door_internal": 10000,
    "window_sqft": 650,
    "plumbing": 120,
    "electrical": 110,
    "waterproofing": 32,
    "architect": 60,
}
CONSUMPTION_PER_SQFT: dict[str, float] = {
    "cement": 0.45,
    "steel": 4.0,
    "sand": 1.3,
    "aggregate": 1.4,
    "bricks": 7.5,
    "paint": 0.045,
    "flooring": 1.05,
    "window_ratio": 0.12,
}
SQFT_PER_DOOR = 225
QUALITY_MULTIPLIERS: dict[str, float] = {
    "Basic": 0.9,
    "Standard": 1.0,
    "Premium": 1.3,
}


class EstimatorRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    location: str | None = None
    tier: str = DEFAULT_TIER
    plot_size: Any = Field(default=None, alias="plotSize")
    floors: Any = DEFAULT_FLOORS
    quality: str = "Standard"
    inc_labor: bool = False
    inc_plumbing: bool = False
    inc_electrical: bool = False
    inc_waterproof: bool = False
    inc_architect: bool = False

    @field_validator("tier", "quality", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator(
        "inc_labor",
        "inc_plumbing",
        "inc_electrical",
        "inc_waterproof",
        "inc_architect",
        mode="before",
    )
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return bool(value)


@dataclass(frozen=True)
class MaterialLine:
    quantity: str
    cost: float

    def to_dict(self) -> dict[str, object]:
        return {"q": self.quantity, "c": json_number(self.cost)}


@dataclass(frozen=True)
class ConstructionBudget:
    materials: dict[str, MaterialLine]
    services: dict[str, float] = field(default_factory=dict)
    total_material: float = 0.0
    total_services: float = 0.0
    gst: float = 0.0
    contingency: float = 0.0
    final_budget: float = 0.0
    cost_sqft: float = 0.0
    area: float = 0.0

    def to_dict(self) -> dict[str, object]:
        return {
            "materials": {
                name: line.to_dict() for name, line in self.materials.items()
            },
            "services": {
                name: json_number(cost) for name, cost in self.services.items()
            },
            "total_material": json_number(self.total_material),
            "total_services": json_number(self.total_services),
            "gst": json_number(self.gst),
            "contingency": json_number(self.contingency),
            "final_budget": json_number(self.final_budget),
            "cost_sqft": json_number(self.cost_sqft),
            "area": json_number(self.area),
        }


def _number_or_default(raw: Any, default: float, *, integral: bool) -> float:
    try:
        value = int(float(raw)) if integral else float(raw)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(value) or value == 0:
        return default
    return value


def _label(quantity: float, unit: str) -> str:
    return f"{format_number(round_half_up(quantity))} {unit}"


def estimate_construction_budget(request: EstimatorRequest) -> ConstructionBudget:
    plot_size = _number_or_default(
        request.plot_size, DEFAULT_PLOT_SIZE_SQFT, integral=False
    )
    floors = _number_or_default(request.floors, DEFAULT_FLOORS, integral=True)
    area = plot_size * COVERAGE_RATIO * floors

    quality_mult = QUALITY_MULTIPLIERS.get(request.quality, 1.0)
    tier = request.tier if request.tier in TIERS else DEFAULT_TIER

    def rate(item: str) -> float:
        if item in TIERED_RATES:
            return TIERED_RATES[item][tier]
        return FLAT_RATES[item]

    usage = CONSUMPTION_PER_SQFT
    qty_cement = area * usage["cement"]
    cost_cement = qty_cement * rate("cement")
    qty_steel = area * usage["steel"]
    cost_steel = qty_steel * rate("steel")
    qty_sand = area * usage["sand"]
    cost_sand = qty_sand * rate("sand")
    qty_aggregate = area * usage["aggregate"]
    cost_aggregate = qty_aggregate * rate("aggregate")
    qty_bricks = area * usage["bricks"]
    cost_bricks = qty_bricks * rate("bricks")

    qty_floor = area * usage["flooring"]
    cost_floor = qty_floor * rate("flooring") * quality_mult
    qty_paint = area * usage["paint"]
    cost_paint = qty_paint * rate("paint_liter") * quality_mult
    door_ratio = area / SQFT_PER_DOOR
    door_count = math.ceil(door_ratio) if math.isfinite(door_ratio) else door_ratio
    cost_doors = (
        rate("door_main") + (door_count - 1) * rate("door_internal")
    ) * quality_mult
    qty_window = area * usage["window_ratio"]
    cost_window = qty_window * rate("window_sqft") * quality_mult

    total_material = (
        cost_cement
        + cost_steel
        + cost_sand
        + cost_aggregate
        + cost_bricks
        + cost_floor
        + cost_paint
        + cost_doors
        + cost_window
    )
    materials = {
        "Cement": MaterialLine(_label(qty_cement, "Bags"), cost_cement),
        "Steel": MaterialLine(_label(qty_steel, "Kg"), cost_steel),
        "Sand": MaterialLine(_label(qty_sand, "cft"), cost_sand),
        "Aggregates": MaterialLine(_label(qty_aggregate, "cft"), cost_aggregate),
        "Bricks": MaterialLine(_label(qty_bricks, "Pcs"), cost_bricks),
        "Flooring": MaterialLine(_label(qty_floor, "sq.ft"), cost_floor),
        "Paint (Mat)": MaterialLine(_label(qty_paint, "Ltr"), cost_paint),
        "Doors/Windows": MaterialLine("Lump Sum", cost_doors + cost_window),
    }

    service_flags = (
        ("Civil Labor", request.inc_labor, "labor"),
        ("Plumbing", request.inc_plumbing, "plumbing"),
        ("Electrical", request.inc_electrical, "electrical"),
        ("Waterproofing", request.inc_waterproof, "waterproofing"),
        ("Architect", request.inc_architect, "architect"),
    )
    services: dict[str, float] = {}
    services_total = 0.0
    for name, enabled, rate_key in service_flags:
        if enabled:
            cost = area * rate(rate_key)
            services_total += cost
            services[name] = cost

    subtotal = total_material + services_total
    gst = subtotal * GST_RATE
    premium_build = tier == "Tier 1" or request.quality == "Premium"
    contingency_ratio = 0.1 if premium_build else 0.05
    contingency = subtotal * contingency_ratio
    final_budget = subtotal + gst + contingency

    return ConstructionBudget(
        materials=materials,
        services=services,
        total_material=total_material,
        total_services=services_total,
        gst=gst,
        contingency=contingency,
        final_budget=final_budget,
        cost_sqft=final_budget / area,
        area=area,
    )
