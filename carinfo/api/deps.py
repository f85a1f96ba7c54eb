"""
Purpose:
- FastAPI dependencies handing the startup-built objects to route handlers.
"""

from fastapi import Request
from ..vlm.gemini_client import GeminiClient

def get_gemini_client(request: Request) -> GeminiClient:
    return request.app.state.gemini
