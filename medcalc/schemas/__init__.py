"""Pydantic schemas for patients and export/submission bundles."""
