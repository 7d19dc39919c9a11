"""
Group sequencing state module.

Derives superset groups from a plan, runs the round state machine on
completed sets, and resolves manual next/previous navigation.
"""
