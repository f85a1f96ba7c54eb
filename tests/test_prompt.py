import base64

from carinfo.vlm.prompt import VEHICLE_PROMPT, build_request

def test_request_has_prompt_then_image(settings):
    body = build_request(b"\x01\x02\x03", "image/png", settings)
    (turn,) = body["contents"]
    assert turn["role"] == "user"
    text_part, image_part = turn["parts"]
    assert text_part == {"text": VEHICLE_PROMPT}
    assert image_part["inlineData"]["mimeType"] == "image/png"
    assert base64.b64decode(image_part["inlineData"]["data"]) == b"\x01\x02\x03"

def test_generation_config_defaults(settings):
    body = build_request(b"x", "image/jpeg", settings)
    assert body["generationConfig"] == {
        "temperature": 0.9,
        "topK": 32,
        "topP": 0.95,
        "maxOutputTokens": 1024,
    }

def test_safety_settings_block_medium_and_above(settings):
    body = build_request(b"x", "image/jpeg", settings)
    cats = {s["category"] for s in body["safetySettings"]}
    assert cats == {
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    }
    assert all(s["threshold"] == "BLOCK_MEDIUM_AND_ABOVE" for s in body["safetySettings"])

def test_prompt_describes_both_reply_shapes():
    assert '"vehicle"' in VEHICLE_PROMPT
    assert '"error": "The image does not contain a vehicle."' in VEHICLE_PROMPT
    assert "YYYY-YYYY" in VEHICLE_PROMPT
