"""Core: domain models, contracts and the request pipeline.

Domain models and contracts know nothing about httpx or the CLI; the
default transport plugs in through `core.interfaces`.
"""
