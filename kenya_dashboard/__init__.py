"""
Core package for the Kenya economic analysis dashboard.

Submodules provide indicator data loading, year filtering, value formatting,
and user interface rendering helpers that are orchestrated by the top-level
`app.py`.
"""
