"""
Sensitivity analysis for the FCFF DCF.

Builds 2D tables of DCF value per share across WACC and terminal growth
rates, holding the revenue path and operating drivers fixed. Every cell goes
through the same WACC spread guard as a regular run.

CLI Usage:
  python -m equity_valuation.analysis.sensitivity \\
      --wacc-rates 0.08,0.09,0.10 \\
      --growth-rates 0.02,0.03,0.04
"""

import argparse
import logging
from pathlib import Path

import pandas as pd

from equity_valuation.analysis.store_tracker import latest_actual_stores
from equity_valuation.domain.types import DCFAssumptions
from equity_valuation.domain.types import SCENARIO_NAMES
from equity_valuation.engine.baseline import net_cash
from equity_valuation.engine.dcf import compute_fcff_valuation
from equity_valuation.engine.scenarios import DEFAULT_SCENARIO
from equity_valuation.policies.discount import SpreadGuardedWACC
from equity_valuation.scenarios.config import ValuationConfig
from equity_valuation.scenarios.registry import create_revenue_policy

logger = logging.getLogger(__name__)


class SensitivityTableBuilder:
  """
  Build 2D sensitivity tables for DCF value per share.

  Varies WACC and terminal growth while keeping the revenue path, margins,
  tax, ROC, net cash and shares fixed from the configuration.
  """

  def __init__(self, config: ValuationConfig):
    """
    Initialize sensitivity table builder.

    Args:
        config: Valuation configuration; its active scenario drives the
            store-based revenue path
    """
    self.config = config
    scenario = config.active_scenario
    if scenario not in SCENARIO_NAMES:
      scenario = DEFAULT_SCENARIO

    store_start = latest_actual_stores(config.actual_stores_by_quarter,
                                       config.start_stores)
    policy = create_revenue_policy(config, config.store_kpi(scenario),
                                   store_start)
    self.revenue_path = policy.compute(config.plan_revenue_bn,
                                       config.base_year).value
    self.net_cash_bn = net_cash(config.cash_bn, config.htm_bn,
                                config.borrow_bn)

    logger.info('Initialized SensitivityTableBuilder')
    logger.info('  Revenue model: %s', config.revenue_model)
    logger.info('  Final-year revenue: %.1f bn', self.revenue_path[-1])
    logger.info('  Net cash: %.1f bn', self.net_cash_bn)

  def value_per_share(self, wacc: float, terminal_growth: float) -> float:
    """DCF value per share for one (WACC, g) pair, spread guard applied."""
    effective = SpreadGuardedWACC(wacc=wacc).compute(terminal_growth).value
    assumptions = DCFAssumptions(
        base_revenue_bn=self.config.plan_revenue_bn,
        cagr=self.config.cagr,
        ebit_margin=self.config.ebit_margin,
        tax_rate=self.config.tax_rate,
        roc=self.config.roc,
        wacc=effective,
        terminal_growth=terminal_growth,
        net_cash_bn=self.net_cash_bn,
        shares=self.config.shares,
        revenue_path=self.revenue_path,
        base_year=self.config.base_year,
    )
    return compute_fcff_valuation(assumptions).value_per_share

  def build(
      self,
      wacc_rates: list[float],
      terminal_growth_rates: list[float],
  ) -> pd.DataFrame:
    """
    Build 2D sensitivity table.

    Args:
        wacc_rates: List of WACCs (e.g., [0.08, 0.09, 0.10])
        terminal_growth_rates: List of terminal growth rates
                               (e.g., [0.02, 0.03, 0.04])

    Returns:
        DataFrame with WACCs as index, terminal growth rates as columns,
        and DCF values per share as cell values
    """
    if not wacc_rates:
      raise ValueError('wacc_rates cannot be empty')
    if not terminal_growth_rates:
      raise ValueError('terminal_growth_rates cannot be empty')

    logger.info('Building sensitivity table: %d x %d', len(wacc_rates),
                len(terminal_growth_rates))

    data_rows = [[self.value_per_share(w, g)
                  for g in terminal_growth_rates]
                 for w in wacc_rates]

    w_labels = [f'{w:.1%}' for w in wacc_rates]
    g_labels = [f'{g:.1%}' for g in terminal_growth_rates]

    df = pd.DataFrame(data_rows, index=w_labels, columns=g_labels)
    df.index.name = 'WACC'
    df.columns.name = 'Terminal Growth'
    return df


def _parse_float_list(s: str) -> list[float]:
  """Parse comma-separated float list."""
  return [float(x.strip()) for x in s.split(',')]


def _frange(start: float, stop: float, step: float) -> list[float]:
  """
  Inclusive float range with rounding.

  Args:
      start: Start value
      stop: Stop value (inclusive)
      step: Step size

  Returns:
      List of floats from start to stop (inclusive)
  """
  if step <= 0:
    raise ValueError('step must be > 0')
  n = int(round((stop - start) / step))
  if n < 0:
    return []
  return [round(start + k * step, 12) for k in range(n + 1)]


def main() -> None:
  """CLI entrypoint for sensitivity analysis."""
  parser = argparse.ArgumentParser(
      description='DCF Sensitivity Analysis',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
Examples:
  # Explicit rates
  python -m equity_valuation.analysis.sensitivity \\
      --wacc-rates 0.08,0.09,0.10 --growth-rates 0.02,0.03,0.04

  # Range specification with a config file
  python -m equity_valuation.analysis.sensitivity --config plan.json \\
      --wacc-min 0.08 --wacc-max 0.12 --wacc-step 0.01 \\
      --growth-min 0.01 --growth-max 0.04 --growth-step 0.005
      """)

  parser.add_argument('--config',
                      type=Path,
                      help='JSON config file (default: built-in plan)')

  # Option 1: Explicit lists
  parser.add_argument('--wacc-rates',
                      type=str,
                      help='Comma-separated WACCs (e.g., 0.08,0.10)')
  parser.add_argument('--growth-rates',
                      type=str,
                      help='Comma-separated terminal growth rates')

  # Option 2: Range specification
  parser.add_argument('--wacc-min', type=float, help='Minimum WACC')
  parser.add_argument('--wacc-max', type=float, help='Maximum WACC')
  parser.add_argument('--wacc-step',
                      type=float,
                      default=0.01,
                      help='WACC step (default: 0.01)')

  parser.add_argument('--growth-min', type=float, help='Minimum growth rate')
  parser.add_argument('--growth-max', type=float, help='Maximum growth rate')
  parser.add_argument('--growth-step',
                      type=float,
                      default=0.005,
                      help='Growth rate step (default: 0.005)')

  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Verbose output')

  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  if args.config:
    config = ValuationConfig.from_json_file(args.config)
  else:
    config = ValuationConfig.default()

  if args.wacc_rates:
    wacc_rates = _parse_float_list(args.wacc_rates)
  elif args.wacc_min is not None and args.wacc_max is not None:
    wacc_rates = _frange(args.wacc_min, args.wacc_max, args.wacc_step)
  else:
    wacc_rates = [0.08, 0.09, 0.10, 0.11]
    logger.warning('No WACCs specified, using default: %s', wacc_rates)

  if args.growth_rates:
    growth_rates = _parse_float_list(args.growth_rates)
  elif args.growth_min is not None and args.growth_max is not None:
    growth_rates = _frange(args.growth_min, args.growth_max, args.growth_step)
  else:
    growth_rates = [0.02, 0.03, 0.04]
    logger.warning('No growth rates specified, using default: %s',
                   growth_rates)

  builder = SensitivityTableBuilder(config)
  table = builder.build(
      wacc_rates=wacc_rates,
      terminal_growth_rates=growth_rates,
  )

  print('\n' + '=' * 80)
  print(f'Sensitivity Analysis: {config.ticker} ({config.name})')
  print('=' * 80)
  print(f'Revenue model: {config.revenue_model}')
  print(f'EBIT margin: {config.ebit_margin * 100:.1f}%')
  print(f'ROC: {config.roc * 100:.1f}%')
  print('\n' + '=' * 80)
  print('DCF Value per Share (VND)')
  print('=' * 80)
  print(table.to_string(float_format=lambda x: f'{x:,.0f}'))
  print('=' * 80 + '\n')


if __name__ == '__main__':
  main()
