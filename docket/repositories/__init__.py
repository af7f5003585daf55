"""
Persistence adapters.

These modules encapsulate how cases are held in memory and stored on disk
(today a JSON slot file). Services depend on these classes rather than
touching the file directly.
"""
