# Path: route_finder/core/__init__.py
"""
route_finder Core Package

Core utilities shared by all layers.

Submodules:
    - logger: IPO-aware logging system
"""
