"""Tabular views of valuation results for display."""

from collections.abc import Sequence

import pandas as pd

from equity_valuation.domain.types import DCFResult
from equity_valuation.domain.types import ScenarioResult
from equity_valuation.domain.types import StoreRevenuePath


def scenario_frame(table: Sequence[ScenarioResult]) -> pd.DataFrame:
  """Scenario table indexed by scenario name, upside in percent."""
  df = pd.DataFrame([r.to_dict() for r in table]).set_index('name')
  df['upside_pct'] = (df['upside'] * 100).round(1)
  df['target_price'] = df['target_price'].round(0)
  return df


def dcf_frame(result: DCFResult) -> pd.DataFrame:
  """Explicit-period DCF rows indexed by year."""
  df = pd.DataFrame([vars(r) for r in result.rows]).set_index('year')
  for col in ('revenue_bn', 'fcff_bn', 'pv_bn'):
    df[col] = df[col].round(1)
  return df


def store_path_frame(path: StoreRevenuePath) -> pd.DataFrame:
  """Store-driven revenue rows indexed by year."""
  return pd.DataFrame([vars(r) for r in path.rows]).set_index('year')
