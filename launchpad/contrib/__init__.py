"""Launchpad contrib: manifest audits and marketplace badges.

These helpers act on the same publishable projects the reconciler sees
but take no part in status classification or orchestration.
"""
