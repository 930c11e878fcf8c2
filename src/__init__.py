"""
Ledger Engine - Source Package

The ledger merge and goal progress engine of a personal-finance planner.

DESIGN PRINCIPLES:
1. Pure functions over in-memory snapshots; the host owns persistence
2. Total functions: missing data degrades to placeholders, never errors
3. Debt progress runs opposite to savings progress
4. Sign conventions are dispatched per account kind, never assumed
5. The store is swappable
"""

__version__ = "1.0.0"
__author__ = "Ledger Engine Team"
