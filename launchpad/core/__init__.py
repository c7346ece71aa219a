"""Reconciliation and orchestration engine."""
