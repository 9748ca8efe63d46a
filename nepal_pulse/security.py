import re


def redact_secrets(text: str) -> str:
    """Redact API keys and bearer tokens from log lines and error strings."""
    if not isinstance(text, str):
        return text

    redacted = text

    # Query params like key=, api_key=, token=, secret=
    redacted = re.sub(r"(?i)(api[_-]?key|key|token|secret)=([^&\s]+)", r"\1=***REDACTED***", redacted)

    # Google API keys embedded in provider error messages
    redacted = re.sub(r"AIza[0-9A-Za-z_\-]{20,}", "***REDACTED***", redacted)

    # x-goog-api-key: <key>
    redacted = re.sub(r"(?i)(x-goog-api-key:\s*)\S+", r"\1***REDACTED***", redacted)

    redacted = re.sub(r"(?i)Bearer\s+[A-Za-z0-9._\-]+", "Bearer ***REDACTED***", redacted)

    return redacted


def is_configured_key(value: str) -> bool:
    """Return True if an API key is set and is not a template placeholder."""
    if not value:
        return False
    s = value.strip()
    if not s:
        return False
    return ('YOUR_' not in s) and ('your_' not in s)
