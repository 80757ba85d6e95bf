"""
Built-in rule sets.

Each game module exposes a create_*_rules() factory returning a RuleSet
that passes validation.
"""

from .teg import create_teg_rules

__all__ = ["create_teg_rules"]
