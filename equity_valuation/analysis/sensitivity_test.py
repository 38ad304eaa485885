import pytest

from equity_valuation.analysis.sensitivity import SensitivityTableBuilder
from equity_valuation.analysis.sensitivity import _frange
from equity_valuation.analysis.sensitivity import _parse_float_list
from equity_valuation.run import run_valuation
from equity_valuation.scenarios.config import ValuationConfig


class TestSensitivityTableBuilder:
  """Tests for SensitivityTableBuilder."""

  def test_shape_and_labels(self, default_config):
    df = SensitivityTableBuilder(default_config).build(
        wacc_rates=[0.08, 0.09, 0.10],
        terminal_growth_rates=[0.02, 0.03],
    )

    assert df.shape == (3, 2)
    assert list(df.index) == ['8.0%', '9.0%', '10.0%']
    assert list(df.columns) == ['2.0%', '3.0%']
    assert df.index.name == 'WACC'
    assert df.columns.name == 'Terminal Growth'

  def test_matches_full_run(self, default_config):
    """The (9%, 3%) cell equals the DCF value of a default run."""
    builder = SensitivityTableBuilder(default_config)
    report = run_valuation(default_config)

    assert builder.value_per_share(0.09, 0.03) == pytest.approx(
        report.dcf.value_per_share)

  def test_matches_full_run_cagr(self):
    config = ValuationConfig.cagr_revenue()
    builder = SensitivityTableBuilder(config)

    assert builder.value_per_share(0.09, 0.03) == pytest.approx(
        run_valuation(config).dcf.value_per_share)

  def test_monotonic(self, default_config):
    """Value falls with WACC and rises with terminal growth."""
    df = SensitivityTableBuilder(default_config).build(
        wacc_rates=[0.08, 0.09, 0.10, 0.11],
        terminal_growth_rates=[0.01, 0.02, 0.03],
    )

    for col in df.columns:
      assert df[col].is_monotonic_decreasing
    for _, row in df.iterrows():
      assert row.is_monotonic_increasing

  def test_spread_guard_applied(self, default_config):
    """WACCs below g + 0.5pp collapse onto the same guarded rate."""
    builder = SensitivityTableBuilder(default_config)

    assert builder.value_per_share(0.01, 0.03) == builder.value_per_share(
        0.02, 0.03)

  def test_unknown_active_scenario(self, default_config):
    default_config.active_scenario = 'Moon'
    builder = SensitivityTableBuilder(default_config)
    default_config.active_scenario = 'Base'

    assert builder.revenue_path == SensitivityTableBuilder(
        default_config).revenue_path

  def test_empty_rates(self, default_config):
    builder = SensitivityTableBuilder(default_config)

    with pytest.raises(ValueError, match='wacc_rates'):
      builder.build([], [0.03])
    with pytest.raises(ValueError, match='terminal_growth_rates'):
      builder.build([0.09], [])


class TestHelpers:
  """Tests for CLI helpers."""

  def test_parse_float_list(self):
    assert _parse_float_list('0.08, 0.09,0.1') == [0.08, 0.09, 0.1]

  def test_frange(self):
    assert _frange(0.08, 0.10, 0.01) == [0.08, 0.09, 0.1]

  def test_frange_empty(self):
    assert _frange(0.10, 0.08, 0.01) == []

  def test_frange_bad_step(self):
    with pytest.raises(ValueError):
      _frange(0.08, 0.10, 0.0)
