from __future__ import annotations

from dataclasses import dataclass

from homeloan.domain.loan.inputs import PropertyDetails


@dataclass(frozen=True)
class CostMultipliers:
    luxury_multiplier: float
    location_multiplier: float


@dataclass(frozen=True)
class PropertyCosts:
    built_up_area: float
    cost_per_sqft: float
    construction_cost: float
    plot_cost: float
    property_value: float


def estimate_property_costs(
    details: PropertyDetails, multipliers: CostMultipliers
) -> PropertyCosts:
    built_up_area = details.plot_size_sqft * details.floors
    cost_per_sqft = (
        details.base_cost_per_sqft
        * multipliers.luxury_multiplier
        * multipliers.location_multiplier
    )
    construction_cost = built_up_area * cost_per_sqft

    plot_cost = 0.0
    property_value = construction_cost
    if details.include_plot:
        plot_cost = details.plot_price
        property_value = details.plot_price + construction_cost

    return PropertyCosts(
        built_up_area=built_up_area,
        cost_per_sqft=cost_per_sqft,
        construction_cost=construction_cost,
        plot_cost=plot_cost,
        property_value=property_value,
    )
