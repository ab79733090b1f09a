"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- CLI: The ``local-time`` command (argparse)

Entrypoints translate command-line requests into use case calls
and format responses for the terminal.
"""
