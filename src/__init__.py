"""Application Layer.

Infrastructure services that feed the domain.
This layer handles file I/O and hands domain Value Objects back to callers.
"""
