"""Configuration package for the donkey bot.

Constants are grouped by concern. Runtime overrides from the environment are
resolved in ``backend.app_factory.AppContext``.
"""
