"""
Shared Kernel Module
====================

This module contains shared infrastructure used across all bounded contexts
(accounts, betting, results, wallet, admin).

Architecture Pattern: Modular Monolith
- Each module is a bounded context
- Shared kernel contains only generic infrastructure
- Domain models live within each module

DO NOT add betting or wallet business logic to the shared kernel.
"""

__version__ = "1.0.0"
