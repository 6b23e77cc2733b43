"""
models/ - Domain Models
=======================
Plain dataclasses passed between the repository and the HTTP handlers.
"""
