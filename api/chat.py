# api/chat.py
# Serverless entry point: the platform serves the ASGI `app` at /api/chat.
from portfolio_chat.app import app

__all__ = ["app"]
