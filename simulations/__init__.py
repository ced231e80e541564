# simulations/__init__.py
"""
Monte Carlo experiments for the coupon-collector repo.

Run a batch via:
    python -m simulations.collect SIMULATIONS MAX_RUNS P1 [P2 ...] [--seed N] [--output FILE] [--plot]
"""
