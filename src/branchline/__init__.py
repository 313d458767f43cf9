"""Branching dialogue story engine with affinity and skill gating."""

__version__ = "0.1.0"
