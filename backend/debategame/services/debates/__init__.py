"""Debate domain services: turn order, argument submission and judging.

This package holds the debate rules imported by the HTTP routes, keeping
transport concerns separated from turn-taking and scoring.
"""
