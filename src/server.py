"""
Web Server - Sanic application exposing the ANSI converter over HTTP
"""

import logging
import socket

from sanic import Sanic, response

from ansi_to_html import AnsiToHtml
from api_routes import api_bp
from converter_config import ConverterConfig

logger = logging.getLogger(__name__)


HTML_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <title>ANSI Colors</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 20px; }
        textarea { width: 100%; height: 160px; font-family: monospace; }
        pre { background-color: #1e1e1e; color: #d3d7cf; padding: 10px; white-space: pre-wrap; }
    </style>
</head>
<body>
    <h1>ANSI Colors</h1>
    <textarea id="input" placeholder="Paste terminal output here"></textarea>
    <button id="convert">Convert</button>
    <pre id="output"></pre>

    <script>
        document.getElementById('convert').onclick = async function() {
            const res = await fetch('/api/convert', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify({text: document.getElementById('input').value})
            });
            const data = await res.json();
            document.getElementById('output').innerHTML = data.html || data.error;
        };
    </script>
</body>
</html>
"""


def find_available_port(start_port=8000, max_attempts=100, host="127.0.0.1"):
    """Find an available port starting from start_port"""
    for port in range(start_port, start_port + max_attempts):
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
                sock.bind((host, port))
                return port
        except OSError:
            continue
    raise RuntimeError(f"No available ports found in range {start_port}-{start_port + max_attempts}")


def create_app(config: ConverterConfig, name: str = "AnsiColors") -> Sanic:
    """Build the Sanic app with converter settings in its context"""
    app = Sanic(name)
    app.config.AUTO_RELOAD = False

    app.ctx.converter = AnsiToHtml(aggressive=config.get("converter.aggressive_styles", False))
    app.ctx.container_tag = config.get("document.container_tag", "pre")
    app.ctx.processed_class = config.get("document.processed_class", "ansi-processed")

    app.blueprint(api_bp)

    @app.route("/")
    async def index(_request):
        """Serve the conversion page"""
        return response.html(HTML_TEMPLATE)

    return app


def run_server(config: ConverterConfig, host: str = None, port: int = None):
    """Run the web service until interrupted"""
    host = host or config.get("server.host", "127.0.0.1")
    if port is None:
        port = find_available_port(
            config.get("server.port_range_start", 8000),
            config.get("server.port_range_attempts", 100),
            host,
        )

    app = create_app(config)
    logger.info(f"Serving ANSI converter on http://{host}:{port}")
    app.run(host=host, port=port, single_process=True, access_log=False)
