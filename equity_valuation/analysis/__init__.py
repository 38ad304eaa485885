'''
Valuation analysis utilities.

Note: To avoid RuntimeWarning when using -m flag, import directly:
  from equity_valuation.analysis.sensitivity import SensitivityTableBuilder
'''

__all__ = [
    'SensitivityTableBuilder',
    'dcf_frame',
    'scenario_frame',
    'store_path_frame',
    'store_tracker_frame',
]

# Direct imports for convenience (may cause RuntimeWarning with -m flag)
from equity_valuation.analysis.sensitivity import SensitivityTableBuilder
from equity_valuation.analysis.store_tracker import store_tracker_frame
from equity_valuation.analysis.tables import dcf_frame
from equity_valuation.analysis.tables import scenario_frame
from equity_valuation.analysis.tables import store_path_frame
