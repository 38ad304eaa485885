import pytest

from equity_valuation.domain.types import StoreKPIInputs
from equity_valuation.engine.store_kpi import effective_avg_stores
from equity_valuation.engine.store_kpi import store_driven_scenario


def _kpi(net_new, sssg_delta=0.0, op_leverage=1.0, start=100, ramp=0.5):
  return StoreKPIInputs(start_stores=start, net_new_stores=net_new, ramp=ramp,
                        sssg_delta=sssg_delta, op_leverage=op_leverage)


class TestEffectiveAvgStores:
  """Tests for effective_avg_stores."""

  def test_half_year_with_ramp(self):
    """429 + 20/2 * 0.7 = 436."""
    assert effective_avg_stores(429, 20, 0.7) == pytest.approx(436.0)

  def test_ramp_clamped(self):
    """Ramp above 1 counts as 1, below 0 as 0."""
    assert effective_avg_stores(100, 20, 5.0) == pytest.approx(110.0)
    assert effective_avg_stores(100, 20, -1.0) == pytest.approx(100.0)

  def test_negative_start_floored(self):
    """A negative start count is treated as 0."""
    assert effective_avg_stores(-50, 20, 1.0) == pytest.approx(10.0)

  def test_closures_reduce_average(self):
    assert effective_avg_stores(100, -20, 1.0) == pytest.approx(90.0)


class TestStoreDrivenScenario:
  """Tests for store_driven_scenario."""

  def test_identity_scenario(self, base_kpi):
    """Scenario equal to the plan KPIs reproduces the plan exactly."""
    out = store_driven_scenario(31606.954, 1959.65, 341_149_107, base_kpi,
                                base_kpi)

    assert out.revenue_bn == 31606.954
    assert out.npat_bn == 1959.65
    assert out.eps_vs_plan == 0.0
    assert out.rev_ratio == 1.0
    assert out.end_stores == 449.0

  def test_more_stores_and_sssg(self):
    """Scenario with 40 openings and +10% SSSG vs a 20-opening plan.

    base_eff = 100 + 20/2*0.5 = 105
    scen_eff = 100 + 40/2*0.5 = 110
    revenue = 1000 * 110/105 * 1.1 = 1152.381
    npat (op_leverage 1) = 100 * 1.152381 = 115.238
    """
    out = store_driven_scenario(1000.0, 100.0, 1e9, _kpi(20), _kpi(40, 0.10))

    assert out.avg_stores_eff == pytest.approx(110.0)
    assert out.revenue_bn == pytest.approx(1152.381, abs=1e-3)
    assert out.npat_bn == pytest.approx(115.238, abs=1e-3)
    assert out.eps == pytest.approx(115.238, abs=1e-3)
    assert out.eps_vs_plan == pytest.approx(0.15238, abs=1e-5)
    assert out.end_stores == 140.0

  def test_operating_leverage(self):
    """NPAT = plan * rev_ratio^2 with leverage 2.

    rev_ratio = 1.152381, squared = 1.327982
    """
    out = store_driven_scenario(1000.0, 100.0, 1e9, _kpi(20),
                                _kpi(40, 0.10, op_leverage=2.0))

    assert out.npat_bn == pytest.approx(132.798, abs=1e-3)

  def test_operating_leverage_clamped(self):
    """Leverage of 10 behaves as 2, leverage of 0 as 0.5."""
    high = store_driven_scenario(1000.0, 100.0, 1e9, _kpi(20),
                                 _kpi(40, 0.10, op_leverage=10.0))
    capped = store_driven_scenario(1000.0, 100.0, 1e9, _kpi(20),
                                   _kpi(40, 0.10, op_leverage=2.0))
    low = store_driven_scenario(1000.0, 100.0, 1e9, _kpi(20),
                                _kpi(40, 0.10, op_leverage=0.0))
    floored = store_driven_scenario(1000.0, 100.0, 1e9, _kpi(20),
                                    _kpi(40, 0.10, op_leverage=0.5))

    assert high.npat_bn == pytest.approx(capped.npat_bn)
    assert low.npat_bn == pytest.approx(floored.npat_bn)

  @pytest.mark.parametrize('shares', [0, -1])
  def test_non_positive_shares(self, shares):
    out = store_driven_scenario(1000.0, 100.0, shares, _kpi(20), _kpi(40))

    assert out.eps == 0.0
    assert out.npat_bn > 0

  def test_zero_base_stores(self):
    """Empty base plan is floored at epsilon instead of dividing by 0."""
    base = _kpi(0, start=0)
    out = store_driven_scenario(1000.0, 100.0, 1e9, base, _kpi(0, start=0))

    assert out.revenue_bn == 0.0
    assert out.npat_bn == 0.0

  def test_zero_plan_revenue(self):
    """No plan revenue gives a zero revenue ratio and zero NPAT."""
    out = store_driven_scenario(0.0, 100.0, 1e9, _kpi(20), _kpi(40))

    assert out.rev_ratio == 0.0
    assert out.npat_bn == 0.0

  def test_zero_plan_npat(self):
    out = store_driven_scenario(1000.0, 0.0, 1e9, _kpi(20), _kpi(40))

    assert out.eps_vs_plan == 0.0

  def test_end_stores_floored(self):
    """Closing more stores than exist ends at 0."""
    out = store_driven_scenario(1000.0, 100.0, 1e9, _kpi(20),
                                _kpi(-500, start=100))

    assert out.end_stores == 0.0
    assert out.avg_stores_eff == 0.0
    assert out.revenue_bn == 0.0

  def test_sssg_delta_below_minus_one(self):
    """An SSSG delta below -100% cannot make revenue negative."""
    out = store_driven_scenario(1000.0, 100.0, 1e9, _kpi(20),
                                _kpi(20, sssg_delta=-3.0))

    assert out.revenue_bn == 0.0
    assert out.npat_bn == 0.0

  @pytest.mark.parametrize('sssg_delta,op_leverage', [
      (0.0, 1.0),
      (-0.05, 0.5),
      (0.10, 2.0),
      (-0.9, 1.5),
  ])
  def test_monotonic_in_net_new_stores(self, sssg_delta, op_leverage):
    """More openings never lowers stores, revenue or NPAT."""
    base = _kpi(20)
    prev = None
    for net_new in range(-40, 81, 5):
      out = store_driven_scenario(1000.0, 100.0, 1e9, base,
                                  _kpi(net_new, sssg_delta, op_leverage))
      if prev is not None:
        assert out.avg_stores_eff >= prev.avg_stores_eff
        assert out.revenue_bn >= prev.revenue_bn
        assert out.npat_bn >= prev.npat_bn
      prev = out

  def test_large_sssg_delta_not_capped(self):
    """A +150% delta scales plan revenue by 2.5 rather than 2."""
    base = _kpi(20)
    out = store_driven_scenario(1000.0, 100.0, 1e9, base,
                                _kpi(20, sssg_delta=1.5))

    assert out.revenue_bn == pytest.approx(2500.0)
    assert out.npat_bn == pytest.approx(250.0)
