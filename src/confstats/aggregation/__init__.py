"""Aggregation module for participant statistics.

- Loads participants through a source and produces a StatsReport
- Forbidden: persistence, retries, report rendering
"""
