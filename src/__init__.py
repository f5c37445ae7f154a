"""Plugin compatibility tester hooks for multi-module plugin builds."""

__version__ = "0.1.0"
