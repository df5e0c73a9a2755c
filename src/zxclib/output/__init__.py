"""Formatting helpers for dates, names, and person queries.

This layer depends only on stdlib. It never imports from services.
"""
