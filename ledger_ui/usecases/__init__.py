"""Use-case layer for orchestrating console workflows.

Modules here coordinate domain objects and ports without performing transport
I/O directly, preserving MVVM + Hexagonal boundaries.
"""
