"""
Grammar Flask Routes
====================
API endpoints exposing the rule engine.

POST /api/grammar/check    {"text": "..."} -> errors
GET  /api/grammar/rules    active rule listing
GET  /api/grammar/lexicon  current lexical tables
POST /api/grammar/lexicon  merge table overrides (between checks)
"""

import time
from functools import wraps
from flask import Blueprint, request, jsonify, g
from werkzeug.exceptions import HTTPException

from config_logging import get_logger, new_correlation_id, ValidationError, ConfigurationError
from . import config as grammar_config
from .engine import get_default_engine
from .formatter import apply_suggestions
from .lexicon import get_lexicon, update_lexicon

logger = get_logger('grammar.routes')

grammar_blueprint = Blueprint('grammar', __name__, url_prefix='/api/grammar')


# =============================================================================
# STANDARDIZED ERROR HANDLING DECORATOR
# =============================================================================

def _error_response(code: str, message: str, status: int):
    return jsonify({
        'success': False,
        'error': {
            'code': code,
            'message': message,
            'correlation_id': getattr(g, 'correlation_id', 'unknown')
        }
    }), status


def handle_grammar_errors(f):
    """
    Decorator for standardized API error handling in grammar routes.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        g.correlation_id = new_correlation_id()
        start_time = time.time()
        try:
            result = f(*args, **kwargs)

            elapsed = time.time() - start_time
            if elapsed > 2.0:
                logger.warning(f"Slow grammar API call: {f.__name__} took {elapsed:.1f}s")

            return result

        except HTTPException:
            raise
        except ValidationError as e:
            logger.warning(f"Validation error in {f.__name__}: {e}")
            return _error_response('VALIDATION_ERROR', str(e), 400)
        except ConfigurationError as e:
            logger.warning(f"Configuration error in {f.__name__}: {e}")
            return _error_response('CONFIGURATION_ERROR', str(e), 400)
        except Exception as e:
            logger.exception(f"Unexpected error in {f.__name__}: {e}")
            return _error_response('INTERNAL_ERROR', 'An unexpected error occurred', 500)

    return decorated


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


# =============================================================================
# ENDPOINTS
# =============================================================================

@grammar_blueprint.route('/check', methods=['POST'])
@handle_grammar_errors
def check_text():
    """
    Check a text buffer.

    Body: {"text": str, "apply": bool (optional)}
    """
    data = _json_body()
    text = data.get('text')
    if not isinstance(text, str):
        raise ValidationError("'text' must be a string", field='text')

    max_length = grammar_config.get('engine.max_text_length', 0)
    if max_length and len(text) > max_length:
        raise ValidationError(f"Text exceeds maximum length of {max_length} characters",
                              field='text')

    errors = get_default_engine().check(text)
    response = {
        'success': True,
        'errors': [e.to_dict() for e in errors],
        'count': len(errors),
    }
    if data.get('apply'):
        response['corrected'] = apply_suggestions(text, errors)

    return jsonify(response)


@grammar_blueprint.route('/rules', methods=['GET'])
@handle_grammar_errors
def list_rules():
    """List the rules the default engine runs."""
    return jsonify({
        'success': True,
        'rules': get_default_engine().describe_rules(),
    })


@grammar_blueprint.route('/lexicon', methods=['GET'])
@handle_grammar_errors
def get_tables():
    return jsonify({'success': True, 'lexicon': get_lexicon().to_dict()})


@grammar_blueprint.route('/lexicon', methods=['POST'])
@handle_grammar_errors
def merge_tables():
    """
    Merge lexicon overrides.

    Body: {"nouns": ["widget"], "hyphens": {"user friendly": "user-friendly"}}
    """
    data = _json_body()
    if not data:
        raise ValidationError("No lexicon overrides given")

    tables = update_lexicon(**data)
    return jsonify({
        'success': True,
        'updated': sorted(data),
        'sizes': {name: len(getattr(tables, name)) for name in sorted(data)},
    })
