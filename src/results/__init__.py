"""
Results Module
==============

Bounded Context for draw results and settlement.

Responsibilities:
- Publish the winning 2D/3D numbers of a draw day (once per day)
- Settle every pending bet of that day: won bets are credited their payout
  and get a payout ledger entry, the rest are marked lost
- Serve today's result and the result history
"""

__version__ = "1.0.0"
