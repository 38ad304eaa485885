'''Pure valuation math: baseline, scenarios, store path, DCF and blend.'''

from equity_valuation.engine.baseline import book_value_per_share
from equity_valuation.engine.baseline import compute_baseline
from equity_valuation.engine.baseline import net_cash
from equity_valuation.engine.baseline import plan_eps
from equity_valuation.engine.baseline import price_from_pe
from equity_valuation.engine.blend import blend_valuation
from equity_valuation.engine.blend import normalize_weights
from equity_valuation.engine.dcf import compute_fcff_valuation
from equity_valuation.engine.dcf import project_revenue_path
from equity_valuation.engine.scenarios import build_scenario_table
from equity_valuation.engine.scenarios import pick_scenario
from equity_valuation.engine.store_kpi import effective_avg_stores
from equity_valuation.engine.store_kpi import store_driven_scenario
from equity_valuation.engine.store_path import build_store_revenue_path

__all__ = [
    'blend_valuation',
    'book_value_per_share',
    'build_scenario_table',
    'build_store_revenue_path',
    'compute_baseline',
    'compute_fcff_valuation',
    'effective_avg_stores',
    'net_cash',
    'normalize_weights',
    'pick_scenario',
    'plan_eps',
    'price_from_pe',
    'project_revenue_path',
    'store_driven_scenario',
]
