import json
from typing import Any

BASE_URL = "http://gotify.test"
APPLICATION_URL = f"{BASE_URL}/application"
TOKEN = "client-token"
AUTH_HEADERS = {"X-Gotify-Key": TOKEN}


def decode_request_body(req: Any) -> Any:
    return json.loads(req.content.decode())


def remote_application(app_id: int, name: str, **overrides: Any) -> dict[str, Any]:
    """An entry as returned by GET /application."""
    entry = {
        "defaultPriority": 0,
        "description": "",
        "id": app_id,
        "image": "static/defaultapp.png",
        "internal": False,
        "lastUsed": None,
        "name": name,
        "token": f"token-{app_id}",
    }
    entry.update(overrides)
    return entry
