"""
Application Layer for the Workout Session API.

This package contains:
- ports/: Abstract interfaces (catalog, cache, log persistence)
- use_cases/: Workout resolution, session lifecycle and finalization
"""
