#!/usr/bin/env python3
"""
Grammar Checker - Flask Application
===================================
Serves the grammar API over HTTP.

Run with: python app.py
Environment: GRAMMAR_HOST, GRAMMAR_PORT, GRAMMAR_DEBUG (see config_logging.py)
"""

import time

from flask import Flask, jsonify, g, request

from config_logging import get_config, get_logger, VERSION, APP_NAME, AppConfig
from grammar import get_status
from grammar.routes import grammar_blueprint

logger = get_logger('app')


def create_app(config: AppConfig = None) -> Flask:
    """Build the Flask application with the grammar blueprint registered."""
    config = config or get_config()

    valid, problems = config.validate()
    if not valid:
        for problem in problems:
            logger.warning(f"Configuration problem: {problem}")

    flask_app = Flask(__name__)
    flask_app.config['MAX_CONTENT_LENGTH'] = config.max_content_length

    flask_app.register_blueprint(grammar_blueprint)

    @flask_app.before_request
    def before_request():
        g.request_start = time.time()

    @flask_app.after_request
    def add_security_headers(response):
        """Add security headers to all responses."""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['X-XSS-Protection'] = '1; mode=block'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

        start = g.get('request_start', None)
        if start is not None:
            logger.debug("Request handled", method=request.method, path=request.path,
                         status=response.status_code,
                         duration_ms=round((time.time() - start) * 1000, 2))
        return response

    @flask_app.errorhandler(413)
    def request_too_large(e):
        return jsonify({
            'success': False,
            'error': {
                'code': 'PAYLOAD_TOO_LARGE',
                'message': f'Request body exceeds {config.max_content_length} bytes'
            }
        }), 413

    @flask_app.route('/api/health', methods=['GET'])
    def health():
        """Liveness check with engine status."""
        return jsonify({
            'status': 'ok',
            'app': APP_NAME,
            'version': VERSION,
            'engine': get_status(),
        })

    return flask_app


config = get_config()
app = create_app(config)


if __name__ == '__main__':
    print("=" * 60)
    print(f"  {APP_NAME} v{VERSION}")
    print(f"  Starting server at http://{config.host}:{config.port}")
    print("=" * 60)
    app.run(host=config.host, port=config.port, debug=config.debug)
