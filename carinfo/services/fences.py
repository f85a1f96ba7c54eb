"""
Purpose:
- Remove markdown code fences the model tends to wrap around its JSON.
"""

from __future__ import annotations

JSON_FENCE = "```json"
FENCE = "```"

def strip_code_fences(text: str) -> str:
    """
    Drop every ```json / ``` marker and nothing else.
    Text without fences comes back unchanged; json.loads copes with the
    whitespace the markers leave behind.
    """
    return text.replace(JSON_FENCE, "").replace(FENCE, "")
