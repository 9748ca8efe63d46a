from app import app
from app_utils import get_env
from nepal_pulse.security import is_configured_key
from nepal_pulse.settings import relay_api_key

if __name__ == '__main__':
    host = get_env('HOST', '127.0.0.1')
    port = int(get_env('PORT', '5000'))
    debug = (get_env('DEBUG', 'False') or '').lower() == 'true'

    print(f"Starting Nepal Pulse relay on {host}:{port}")
    print("API Status Check:")

    gemini_configured = is_configured_key(relay_api_key() or "")
    print(f"  Gemini configured: {gemini_configured}")

    if not gemini_configured:
        print("\n[WARN] API_KEY missing; /api/gemini will answer 500 until it is set.")

    print(f"\nRelay endpoint: http://{host}:{port}/api/gemini")

    app.run(host=host, port=port, debug=debug, threaded=True)
