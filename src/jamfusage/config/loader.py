import json, os, pathlib

DEFAULT_SETTINGS = "config/appsettings.json"

# appsettings key -> environment override
JAMF_ENV = {
    "server": "JAMF_SERVER",
    "client_id": "JAMF_CLIENT_ID",
    "client_secret": "JAMF_CLIENT_SECRET",
}


class ConfigurationError(Exception):
    """A required setting is missing; raised before any network call."""


def _settings_path() -> pathlib.Path:
    return pathlib.Path(os.environ.get("JAMFUSAGE_SETTINGS") or DEFAULT_SETTINGS)

def load_appsettings() -> dict:
    p = _settings_path()
    if not p.exists():
        return {}
    try:
        text = p.read_text(encoding="utf-8").strip()
        if not text:
            return {}
        data = json.loads(text)
    except (OSError, ValueError):
        # malformed JSON → fall back to defaults
        return {}
    return data if isinstance(data, dict) else {}

def get_http_config():
    cfg = load_appsettings().get("http", {})
    timeout = cfg.get("timeout_seconds")
    return {
        "timeout_seconds": float(timeout) if timeout is not None else None,
        "page_size": int(cfg.get("page_size", 100)),
    }

def get_jamf_config():
    """
    Server coordinates and API client credentials.
    Environment variables win over config/appsettings.json.
    """
    cfg = load_appsettings().get("jamf", {})
    out = {}
    for key, env in JAMF_ENV.items():
        value = (os.environ.get(env) or cfg.get(key) or "").strip()
        if not value:
            raise ConfigurationError(f"Property is not set: {key} (appsettings 'jamf.{key}' or ${env})")
        out[key] = value
    out["server"] = normalize_server(out["server"])
    return out

def get_output_config():
    cfg = load_appsettings().get("output", {})
    return {
        "directory": os.environ.get("JAMFUSAGE_OUTPUT_DIR") or cfg.get("directory") or "output",
    }

def normalize_server(server: str) -> str:
    """'https://acme.jamfcloud.com/' -> 'acme.jamfcloud.com'"""
    s = server.strip()
    for prefix in ("https://", "http://"):
        if s.startswith(prefix):
            s = s[len(prefix):]
    return s.rstrip("/")
