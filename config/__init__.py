"""Runtime configuration (environment-driven settings)."""
