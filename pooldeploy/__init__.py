"""
Pool Deploy
===========

Scripts for deploying two SimpleToken contracts and a SimplePool liquidity
pool, and for swapping through or adding liquidity to a deployed pool.
"""

__version__ = "1.0.0"
