"""
Infrastructure layer - logging, settings, and the exception taxonomy.

Nothing in here knows about ticks or calendars; the domain and runtime
layers depend on it, never the other way round.
"""
