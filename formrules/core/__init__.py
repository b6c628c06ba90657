"""Core validation engine: models, predicates, chain checks and rule engine."""
