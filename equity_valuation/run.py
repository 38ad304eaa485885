'''
Single-company valuation entrypoint.

This module wires the engine stages together in dependency order:
1. Baseline metrics from the company snapshot
2. Bear/Base/Bull scenario table (store KPI or EPS driver)
3. Revenue path for the DCF (store-driven or CAGR policy)
4. WACC spread guard and FCFF DCF
5. Blended valuation of P/E, DCF and P/B

Usage:
  from equity_valuation.run import run_valuation
  from equity_valuation.scenarios.config import ValuationConfig

  report = run_valuation(ValuationConfig.default())
  print(f"Blended: {report.blended.value:,.0f} VND")
'''

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from equity_valuation.analysis.store_tracker import latest_actual_stores
from equity_valuation.domain.types import DCFAssumptions
from equity_valuation.domain.types import DCFResult
from equity_valuation.domain.types import SCENARIO_NAMES
from equity_valuation.domain.types import StoreRevenuePath
from equity_valuation.domain.types import ValuationReport
from equity_valuation.engine.baseline import compute_baseline
from equity_valuation.engine.blend import blend_valuation
from equity_valuation.engine.blend import normalize_weights
from equity_valuation.engine.dcf import compute_fcff_valuation
from equity_valuation.engine.scenarios import build_scenario_table
from equity_valuation.engine.scenarios import pick_scenario
from equity_valuation.policies.discount import WACCPolicy
from equity_valuation.policies.discount import cost_of_equity
from equity_valuation.policies.revenue import RevenuePolicy
from equity_valuation.policies.revenue import StorePathRevenue
from equity_valuation.scenarios.config import ValuationConfig
from equity_valuation.scenarios.registry import create_revenue_policy
from equity_valuation.scenarios.registry import create_wacc_policy

logger = logging.getLogger(__name__)


def run_dcf(
    assumptions: DCFAssumptions,
    revenue_policy: RevenuePolicy,
    wacc_policy: WACCPolicy,
) -> Tuple[DCFResult, Optional[StoreRevenuePath], Dict[str, Any]]:
  '''
  Run the DCF with a revenue policy and the WACC guard.

  Args:
    assumptions: DCF assumptions; revenue_path and wacc are replaced by the
      policy outputs
    revenue_policy: Produces the explicit revenue path
    wacc_policy: Produces the effective WACC

  Returns:
    Tuple of (dcf_result, store_path, diag):
    - dcf_result: DCFResult at the effective WACC
    - store_path: Store path rows when the revenue policy is store-driven
    - diag: Prefixed diagnostics of both policies
  '''
  diag: Dict[str, Any] = {}

  revenue_result = revenue_policy.compute(assumptions.base_revenue_bn,
                                          assumptions.base_year)
  diag.update({f'revenue_{k}': v for k, v in revenue_result.diag.items()})

  store_path = None
  if isinstance(revenue_policy, StorePathRevenue):
    store_path = revenue_policy.build(assumptions.base_revenue_bn,
                                      assumptions.base_year)

  wacc_result = wacc_policy.compute(assumptions.terminal_growth)
  diag.update({f'discount_{k}': v for k, v in wacc_result.diag.items()})

  prepared = DCFAssumptions(
      base_revenue_bn=assumptions.base_revenue_bn,
      cagr=assumptions.cagr,
      ebit_margin=assumptions.ebit_margin,
      tax_rate=assumptions.tax_rate,
      roc=assumptions.roc,
      wacc=wacc_result.value,
      terminal_growth=assumptions.terminal_growth,
      net_cash_bn=assumptions.net_cash_bn,
      shares=assumptions.shares,
      revenue_path=revenue_result.value,
      base_year=assumptions.base_year,
  )
  return compute_fcff_valuation(prepared), store_path, diag


def run_valuation(config: Optional[ValuationConfig] = None) -> ValuationReport:
  '''
  Run a full valuation.

  Args:
    config: ValuationConfig (default: ValuationConfig.default())

  Returns:
    ValuationReport with every intermediate result and diagnostics
  '''
  if config is None:
    config = ValuationConfig.default()

  financials = config.financials()
  all_diag: Dict[str, Any] = {
      'scenario': config.name,
      'ticker': config.ticker,
      'revenue_model': config.revenue_model,
      'use_store_kpi': config.use_store_kpi,
  }

  baseline = compute_baseline(financials, config.pb_multiple)

  table = build_scenario_table(
      financials,
      config.base_kpi(),
      config.scenario_specs(),
      use_store_kpi=config.use_store_kpi,
  )
  active = pick_scenario(table, config.active_scenario)
  all_diag['active_scenario'] = active.name

  store_start = latest_actual_stores(config.actual_stores_by_quarter,
                                     config.start_stores)
  all_diag['store_start'] = store_start

  revenue_policy = create_revenue_policy(config, config.store_kpi(active.name),
                                         store_start)
  dcf, store_path, dcf_diag = run_dcf(
      config.dcf_assumptions(baseline.net_cash_bn),
      revenue_policy,
      create_wacc_policy(config),
  )
  all_diag.update(dcf_diag)

  weights = normalize_weights(*config.method_weights())
  blended = blend_valuation(
      pe_value=active.target_price,
      dcf_value=dcf.value_per_share,
      pb_value=baseline.pb_value,
      weights=weights,
      price=financials.price,
  )

  return ValuationReport(
      baseline=baseline,
      scenarios=table,
      active=active,
      store_path=store_path,
      dcf=dcf,
      blended=blended,
      cost_of_equity=cost_of_equity(config.rf, config.beta, config.erp),
      diag=all_diag,
  )


def _log_report(config: ValuationConfig, report: ValuationReport) -> None:
  separator = '=' * 70
  logger.info('\n%s', separator)
  logger.info('Valuation - %s (%s)', config.ticker, config.name)
  logger.info('Active scenario: %s', report.active.name)
  logger.info(separator)

  b = report.baseline
  logger.info('\nBaseline:')
  logger.info('  Plan EPS: %s VND', f'{b.plan_eps:,.0f}')
  logger.info('  Forward P/E: %.1fx', b.forward_pe)
  logger.info('  Net cash: %s bn', f'{b.net_cash_bn:,.1f}')
  logger.info('  BVPS: %s VND', f'{b.bvps:,.0f}')
  logger.info('  Cost of equity (CAPM): %.2f%%', report.cost_of_equity * 100)

  logger.info('\nScenarios:')
  for r in report.scenarios:
    logger.info('  %-4s [%s] EPS %s  TP %s  upside %+.1f%%  Q4 req %s bn',
                r.name, r.driver, f'{r.eps:,.0f}', f'{r.target_price:,.0f}',
                r.upside * 100, f'{r.q4_required_npat_bn:,.1f}')

  logger.info('\nDCF (WACC %.2f%%):', report.dcf.wacc * 100)
  if report.diag.get('discount_wacc_adjusted'):
    logger.info('  WACC raised from %.2f%% to keep spread over g',
                report.diag['discount_wacc_input'] * 100)
  logger.info('  EV: %s bn', f'{report.dcf.enterprise_value_bn:,.1f}')
  logger.info('  Equity: %s bn', f'{report.dcf.equity_value_bn:,.1f}')
  logger.info('  Value/share: %s VND', f'{report.dcf.value_per_share:,.0f}')
  if report.store_path is not None:
    logger.info('  Implied revenue CAGR: %.2f%%',
                report.store_path.implied_cagr * 100)

  bl = report.blended
  logger.info('\nBlended:')
  logger.info('  Weights P/E %.0f%% / DCF %.0f%% / P/B %.0f%%',
              bl.weights.pe * 100, bl.weights.dcf * 100, bl.weights.pb * 100)
  logger.info('  Fair value: %s VND', f'{bl.value:,.0f}')
  logger.info('  Upside: %+.1f%%', bl.upside * 100)
  logger.info('%s\n', separator)


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(description='Run blended valuation')
  parser.add_argument('--config',
                      type=Path,
                      help='JSON config file (default: built-in plan)')
  parser.add_argument(
      '--preset',
      type=str,
      default='default',
      choices=['default', 'cagr_revenue', 'eps_driven'],
      help='Config preset when no --config is given',
  )
  parser.add_argument('--scenario',
                      type=str,
                      choices=list(SCENARIO_NAMES),
                      help='Active scenario (overrides config)')
  parser.add_argument('--no-store-kpi',
                      action='store_true',
                      help='Derive scenario EPS from EPS-vs-plan overrides')
  parser.add_argument('--no-store-dcf',
                      action='store_true',
                      help='Use the flat CAGR revenue path in the DCF')
  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Verbose output')
  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(message)s',
  )

  preset_map = {
      'default': ValuationConfig.default,
      'cagr_revenue': ValuationConfig.cagr_revenue,
      'eps_driven': ValuationConfig.eps_driven,
  }

  if args.config:
    config = ValuationConfig.from_json_file(args.config)
  else:
    config = preset_map[args.preset]()

  if args.scenario:
    config.active_scenario = args.scenario
  if args.no_store_kpi:
    config.use_store_kpi = False
  if args.no_store_dcf:
    config.revenue_model = 'cagr'

  _log_report(config, run_valuation(config))


if __name__ == '__main__':
  main()
