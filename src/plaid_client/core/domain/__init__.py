"""Domain models and value types.

Pure data structures (Pydantic v2 and frozen dataclasses): no HTTP, no CLI.
"""
