"""Domain layer: library (tracks, loading) and playback (queue, clock, transport)."""
