"""
Valuation policies for preparing DCF inputs.

Each policy estimates one input of the DCF (revenue path, discount rate) and
returns both a value and diagnostic information.

To add a new policy:
1. Create a new class inheriting from the appropriate base (e.g., RevenuePolicy)
2. Implement the compute() method returning PolicyOutput
3. Register in scenarios/registry.py
"""

from equity_valuation.policies.discount import SpreadGuardedWACC
from equity_valuation.policies.discount import WACCPolicy
from equity_valuation.policies.discount import cost_of_equity
from equity_valuation.policies.revenue import CAGRRevenue
from equity_valuation.policies.revenue import RevenuePolicy
from equity_valuation.policies.revenue import StorePathRevenue

__all__ = [
  'RevenuePolicy', 'CAGRRevenue', 'StorePathRevenue',
  'WACCPolicy', 'SpreadGuardedWACC', 'cost_of_equity',
]
