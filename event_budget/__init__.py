"""
Event Budget - Source Package

A personal budgeting tracker for planning a single event: planning
items grouped by category, a guest list with dues and payments, and
the derived totals that drive dashboards and reports.

DESIGN PRINCIPLES:
1. The Record Store owns the data, the engine only reads it
2. Every summary is re-derived from the current snapshot
3. Aggregations are pure and never fail on valid input
4. Bad persisted data degrades to an empty collection
5. Storage backend is swappable
"""

__version__ = "1.0.0"
__author__ = "Event Budget Team"
