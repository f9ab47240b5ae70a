"""Real-estate agency back office."""
