from equity_valuation.domain.types import CompanyFinancials
from equity_valuation.domain.types import DCFAssumptions
from equity_valuation.domain.types import MethodWeight
from equity_valuation.domain.types import ScenarioResult
from equity_valuation.domain.types import StoreDCFRow
from equity_valuation.domain.types import StoreKPIInputs
from equity_valuation.domain.types import StoreRevenuePath


class TestInputCoercion:
  """Input records coerce numeric fields to finite floats."""

  def test_company_financials_non_finite(self):
    """NaN, inf and text degrade to 0."""
    fin = CompanyFinancials(
        price=float('nan'),
        shares='not a number',
        plan_npat_bn=float('inf'),
        plan_revenue_bn='31606.954',
    )

    assert fin.price == 0.0
    assert fin.shares == 0.0
    assert fin.plan_npat_bn == 0.0
    assert fin.plan_revenue_bn == 31606.954

  def test_store_kpi_defaults(self):
    """Ramp, SSSG delta and leverage have defaults."""
    kpi = StoreKPIInputs(start_stores=429, net_new_stores=20)

    assert kpi.start_stores == 429.0
    assert isinstance(kpi.start_stores, float)
    assert kpi.ramp == 0.7
    assert kpi.sssg_delta == 0.0
    assert kpi.op_leverage == 1.0

  def test_dcf_revenue_path_coerced(self):
    """Revenue path entries are coerced one by one."""
    a = DCFAssumptions(
        base_revenue_bn=100,
        cagr=0.1,
        ebit_margin=0.2,
        tax_rate=0.2,
        roc=0.2,
        wacc=0.1,
        terminal_growth=0.03,
        net_cash_bn=0,
        shares=1e9,
        revenue_path=[110, float('nan'), '121', None, 146.41],
    )

    assert a.revenue_path == [110.0, 0.0, 121.0, 0.0, 146.41]

  def test_method_weight_enabled_untouched(self):
    """Booleans are not coerced."""
    w = MethodWeight(weight=float('nan'), enabled=False)

    assert w.weight == 0.0
    assert w.enabled is False


class TestOutputRecords:
  """Tests for result record helpers."""

  def test_store_revenue_path_revenues(self):
    """revenues lists the total revenue of each row."""
    rows = [
        StoreDCFRow(year=2026 + i, stores_start=0, stores_end=0,
                    avg_stores_eff=0, sssg_abs=0, retail_revenue_bn=0,
                    other_revenue_bn=0, revenue_bn=100.0 + i, yoy=0)
        for i in range(5)
    ]
    path = StoreRevenuePath(rows=rows, implied_cagr=0.0)

    assert path.revenues == [100.0, 101.0, 102.0, 103.0, 104.0]

  def test_scenario_result_to_dict(self):
    """EPS-driven rows leave store fields as None."""
    row = ScenarioResult(name='Bear', driver='EPS', pe=15.0,
                         eps_vs_plan=-0.08, npat_bn=1800.0, eps=5000.0,
                         target_price=75000.0, upside=-0.2,
                         q4_required_npat_bn=190.0)
    d = row.to_dict()

    assert d['name'] == 'Bear'
    assert d['stores_end'] is None
    assert d['revenue_bn'] is None
