"""
Accounts Module
===============

Bounded Context for player accounts.

Responsibilities:
- Register players (with optional referral code) and log them in
- Issue and verify bearer tokens
- Credit referral commission to the referring player
- Bootstrap the first admin account
"""

__version__ = "1.0.0"
