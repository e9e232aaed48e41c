"""Catalog loading, contracts and the pipeline orchestrator."""
