"""
models/ - Domain Models
=======================
Plain dataclasses shared by every layer: the inbound update union,
persisted entities and weather records.
"""
