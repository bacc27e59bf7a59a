"""Core gameplay primitives (task/session models, signals, and the timer queue).

Kept free of FastAPI concerns so it can be reused by API routes, the game loop, and tests.
"""
