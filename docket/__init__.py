"""Docket: a small judiciary case tracker served with FastAPI."""
