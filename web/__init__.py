"""
Web application package for the antichess reply engine.

Provides a stateless FastAPI endpoint that answers a position (and an
optional opponent move) with the engine's reply.
"""
