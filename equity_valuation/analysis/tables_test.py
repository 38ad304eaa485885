from equity_valuation import analysis
from equity_valuation.analysis.tables import dcf_frame
from equity_valuation.analysis.tables import scenario_frame
from equity_valuation.analysis.tables import store_path_frame
from equity_valuation.run import run_valuation


class TestTables:
  """Tests for the display frames."""

  def test_scenario_frame(self, default_config):
    df = scenario_frame(run_valuation(default_config).scenarios)

    assert list(df.index) == ['Bear', 'Base', 'Bull']
    assert df.index.name == 'name'
    assert 'upside_pct' in df.columns
    assert df.loc['Base', 'driver'] == 'STORE'

  def test_dcf_frame(self, default_config):
    df = dcf_frame(run_valuation(default_config).dcf)

    assert list(df.index) == [2026, 2027, 2028, 2029, 2030]
    assert 'fcff_bn' in df.columns

  def test_store_path_frame(self, default_config):
    df = store_path_frame(run_valuation(default_config).store_path)

    assert list(df.index) == [2026, 2027, 2028, 2029, 2030]
    assert df.loc[2026, 'stores_start'] == 429
    assert df.loc[2030, 'stores_end'] == 529

  def test_package_exports(self):
    assert analysis.store_path_frame is store_path_frame
    assert 'store_path_frame' in analysis.__all__
