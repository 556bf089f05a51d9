from homeloan.domain.loan.inputs import PropertyDetails
from homeloan.domain.loan.property_costs import CostMultipliers, estimate_property_costs

_NEUTRAL = CostMultipliers(luxury_multiplier=1.0, location_multiplier=1.0)


def _details(*, include_plot: bool, plot_price: float = 0) -> PropertyDetails:
    return PropertyDetails(
        include_plot=include_plot,
        plot_price=plot_price,
        plot_size_sqft=1200,
        floors=2,
        base_cost_per_sqft=1500,
        luxury_level=0.5,
        location_score=0.5,
    )


def test_construction_only_costs() -> None:
    costs = estimate_property_costs(_details(include_plot=False), _NEUTRAL)

    assert costs.built_up_area == 2400
    assert costs.cost_per_sqft == 1500
    assert costs.construction_cost == 3600000
    assert costs.plot_cost == 0
    assert costs.property_value == 3600000


def test_plot_is_added_to_property_value() -> None:
    without_plot = estimate_property_costs(_details(include_plot=False), _NEUTRAL)
    with_plot = estimate_property_costs(
        _details(include_plot=True, plot_price=1000000), _NEUTRAL
    )

    assert with_plot.plot_cost == 1000000
    assert with_plot.property_value == 1000000 + with_plot.construction_cost
    assert with_plot.property_value > without_plot.property_value


def test_plot_price_is_ignored_without_plot() -> None:
    costs = estimate_property_costs(
        _details(include_plot=False, plot_price=500000), _NEUTRAL
    )

    assert costs.plot_cost == 0
    assert costs.property_value == costs.construction_cost


def test_multipliers_scale_cost_per_sqft() -> None:
    costs = estimate_property_costs(
        _details(include_plot=False),
        CostMultipliers(luxury_multiplier=1.2, location_multiplier=1.5),
    )

    assert abs(costs.cost_per_sqft - 2700) < 1e-9
    assert abs(costs.construction_cost - 6480000) < 1e-6
