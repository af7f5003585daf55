"""
High-level use cases for the Docket app.

Service modules orchestrate the store and the persistence adapter to
implement the case workflow (register, delete, search). Routers call these
services instead of touching the store or the storage file directly.
"""
