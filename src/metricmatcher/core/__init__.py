"""Core matching logic: models, predicates, specs, engine and diagnostics."""
