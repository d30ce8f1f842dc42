"""
Domain layer - the fixed-point C10 time model.

Pure arithmetic over integer tick counts. No clocks are read here; sampling
the host clock lives in :mod:`c10.runtime.clock`.
"""
