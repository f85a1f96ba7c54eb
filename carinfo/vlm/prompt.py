"""
Purpose:
- Fixed instruction text for vehicle identification.
- Build the Gemini `generateContent` request body: instruction + inline image,
  generation config and safety settings.

Notes:
- The prompt asks for the logo as inline image data. Text models rarely manage
  that, so callers must treat `logo` as best-effort.
"""

from __future__ import annotations
from typing import Any, Dict, List
from ..core.settings import SAFETY_CATEGORIES, Settings
from ..services.images import encode_base64

VEHICLE_PROMPT = """Accurately identify the vehicle model, manufacturer, color, and year with your analysis. Please respond in the following JSON format:

{
  "vehicle": {
    "manufacturer": "string",
    "model": "string",
    "color": "string",
    "year": "string",
    "logo": { "image": "image_data" },
    "fuel_type": "string",
    "fuel_efficiency_kmpl": "number",
    "max_speed_kmph": "number",
    "manufacturer_country": "string",
    "years_of_production": "string",
    "horsepower": "number"
  }
}

The "logo" field should contain an actual image of the manufacturer's logo, not a URL.

If the image does not contain a vehicle, respond in this format:
{
  "error": "The image does not contain a vehicle."
}

Example responses:

For a successful identification:
{
  "vehicle": {
    "manufacturer": "Toyota",
    "model": "Camry",
    "color": "White",
    "year": "2020",
    "logo": { "image": "actual_logo_image_data" },
    "fuel_type": "Petrol",
    "fuel_efficiency_kmpl": 14,
    "max_speed_kmph": 210,
    "manufacturer_country": "Japan",
    "years_of_production": "2018-2023",
    "horsepower": 203
  }
}

If the vehicle's year cannot be exactly determined, provide the range in the format "YYYY-YYYY" (e.g., "2002-2006"). Example:
{
  "vehicle": {
    "manufacturer": "Honda",
    "model": "Civic",
    "color": "Black",
    "year": "2002-2006",
    "logo": { "image": "actual_logo_image_data" },
    "fuel_type": "Petrol",
    "fuel_efficiency_kmpl": 16,
    "max_speed_kmph": 220,
    "manufacturer_country": "Japan",
    "years_of_production": "2001-2006",
    "horsepower": 158
  }
}"""

def generation_config(settings: Settings) -> Dict[str, Any]:
    return {
        "temperature": settings.gemini_temperature,
        "topK": settings.gemini_top_k,
        "topP": settings.gemini_top_p,
        "maxOutputTokens": settings.gemini_max_output_tokens,
    }

def safety_settings(settings: Settings) -> List[Dict[str, str]]:
    return [
        {"category": cat, "threshold": settings.gemini_safety_threshold}
        for cat in SAFETY_CATEGORIES
    ]

def build_request(image: bytes, mime_type: str, settings: Settings) -> Dict[str, Any]:
    """
    One user turn with two parts: the instruction, then the image as inlineData.
    """
    parts = [
        {"text": VEHICLE_PROMPT},
        {"inlineData": {"mimeType": mime_type, "data": encode_base64(image)}},
    ]
    return {
        "contents": [{"role": "user", "parts": parts}],
        "generationConfig": generation_config(settings),
        "safetySettings": safety_settings(settings),
    }
