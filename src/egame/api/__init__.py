"""HTTP layer exposing the rules engine."""
