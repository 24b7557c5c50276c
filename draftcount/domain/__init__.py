"""Domain layer for Draftcount.

Pure state and rules with no I/O:

- shared: Result monad and base domain event
- progress: project state, daily rollover
- ledger: pending-delta accounting (grace period, commits)
- challenge: goal presets, goal crossing, bonuses and corrections
"""
