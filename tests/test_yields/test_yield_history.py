"""Tests for time-weighted yield and piecewise projection."""

from decimal import Decimal

from ethena_engine.yields import (
    YieldObservation,
    YieldPeriod,
    calculate_time_weighted_yield,
    project_future_value,
)


class TestTimeWeightedYield:
    def test_empty_series(self) -> None:
        assert calculate_time_weighted_yield([]) == Decimal("0")

    def test_single_observation(self) -> None:
        obs = [YieldObservation(timestamp=1_700_000_000, apy=Decimal("0.12"))]
        assert calculate_time_weighted_yield(obs) == Decimal("0.12")

    def test_two_points_average(self) -> None:
        obs = [
            YieldObservation(0, Decimal("0.10")),
            YieldObservation(100, Decimal("0.20")),
        ]
        assert calculate_time_weighted_yield(obs) == Decimal("0.15")

    def test_longer_interval_weighs_more(self) -> None:
        """(0.15 * 100 + 0.20 * 200) / 300."""
        obs = [
            YieldObservation(0, Decimal("0.10")),
            YieldObservation(100, Decimal("0.20")),
            YieldObservation(300, Decimal("0.20")),
        ]
        assert calculate_time_weighted_yield(obs) == Decimal(55) / Decimal(300)

    def test_constant_yield(self) -> None:
        obs = [YieldObservation(t, Decimal("0.08")) for t in (0, 10, 50, 51)]
        assert calculate_time_weighted_yield(obs) == Decimal("0.08")

    def test_shared_timestamp(self) -> None:
        obs = [
            YieldObservation(500, Decimal("0.10")),
            YieldObservation(500, Decimal("0.30")),
        ]
        assert calculate_time_weighted_yield(obs) == Decimal("0")


class TestProjectFutureValue:
    def test_no_periods(self) -> None:
        assert project_future_value(Decimal("1000"), []) == Decimal("1000")

    def test_single_year(self) -> None:
        value = project_future_value(Decimal("1000"), [YieldPeriod(365, Decimal("0.10"))])
        assert abs(value - Decimal("1100")) < Decimal("1e-12")

    def test_segments_compound_in_sequence(self) -> None:
        periods = [YieldPeriod(365, Decimal("0.10")), YieldPeriod(365, Decimal("0.20"))]
        value = project_future_value(Decimal("1000"), periods)
        assert abs(value - Decimal("1320")) < Decimal("1e-12")

    def test_zero_yield_segment(self) -> None:
        periods = [YieldPeriod(30, Decimal("0")), YieldPeriod(365, Decimal("0.10"))]
        value = project_future_value(Decimal("500"), periods)
        assert abs(value - Decimal("550")) < Decimal("1e-12")

    def test_period_days_from_json(self) -> None:
        """Float and string segment lengths match integer days."""
        expected = project_future_value(Decimal("1000"), [YieldPeriod(365, Decimal("0.10"))])
        for days in (365.0, "365"):
            period = YieldPeriod(days, "0.10")  # type: ignore[arg-type]
            assert period.days == Decimal("365")
            assert project_future_value(1000, [period]) == expected
