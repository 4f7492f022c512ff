"""
Deployment and Interaction Scripts
==================================

Thin entry points for running the pooldeploy flows from a checkout:

- deploy.py: deploy TokenA, TokenB and the pool, then seed liquidity
- interact.py: swap through the pool or add liquidity to it
"""
