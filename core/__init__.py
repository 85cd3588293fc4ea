"""
Core Kernel Module

Foundational utilities shared by all modules.

Components:
- config: Environment-driven tax defaults
- hashing: SHA256 seals for persisted tax records

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['config', 'hashing']
