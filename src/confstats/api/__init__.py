"""API module for confstats.

- Serves the participant stats report over HTTP
- Forbidden: statistics logic, persistence
"""
