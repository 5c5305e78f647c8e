"""
Admin Module
============

Bounded Context for the admin console.

Responsibilities:
- Audit log of admin actions (result publication, transaction reviews)
- Daily betting statistics
- Read views over users and bets for a draw day
"""

__version__ = "1.0.0"
