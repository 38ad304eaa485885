import pytest

from equity_valuation.policies.revenue import CAGRRevenue
from equity_valuation.policies.revenue import StorePathRevenue


class TestCAGRRevenue:
  """Tests for CAGRRevenue policy."""

  def test_path(self):
    result = CAGRRevenue(cagr=0.10).compute(100.0)

    assert result.value == pytest.approx([110.0, 121.0, 133.1, 146.41,
                                          161.051])
    assert result.diag['revenue_method'] == 'cagr'
    assert result.diag['cagr'] == 0.10

  def test_default(self):
    result = CAGRRevenue().compute(31606.954)

    assert result.value[0] == pytest.approx(34135.51, abs=0.01)


class TestStorePathRevenue:
  """Tests for StorePathRevenue policy."""

  def test_matches_build(self):
    policy = StorePathRevenue(retail_share=0.8, other_cagr=0.05,
                              store_start=100, net_new_per_year=10, ramp=0.5,
                              sssg_abs=0.04)
    result = policy.compute(1000.0)
    path = policy.build(1000.0)

    assert result.value == path.revenues
    assert result.value[0] == pytest.approx(1042.0)
    assert len(result.value) == 5

  def test_diag(self):
    policy = StorePathRevenue(store_start=429, net_new_per_year=20,
                              sssg_abs=0.5)
    result = policy.compute(31606.954)

    assert result.diag['revenue_method'] == 'store_path'
    assert result.diag['final_stores'] == 529.0
    assert result.diag['sssg_abs'] == 0.20
    assert result.diag['implied_cagr'] > 0

  def test_base_year_passed_to_rows(self):
    path = StorePathRevenue(store_start=10).build(100.0, base_year=2030)

    assert path.rows[0].year == 2031
