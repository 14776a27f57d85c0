import logging

from flask import Blueprint, current_app, jsonify, request

from textdiff.api.diff import compare_texts
from textdiff.config.tools import DEFAULT_TEXT_DIFF_SETTINGS

logger = logging.getLogger(__name__)

text_diff_bp = Blueprint('text_diff', __name__)


def _settings():
    return current_app.config.get('TEXT_DIFF', DEFAULT_TEXT_DIFF_SETTINGS)


def _too_long(text, limit) -> bool:
    return bool(limit) and isinstance(text, str) and len(text) > limit


@text_diff_bp.route('/api/text-diff/compare', methods=['POST'])
def compare():
    """Compare two texts and return the diff

    Supports multiple output formats:
    - json: Edit script entries with statistics (default)
    - unified: Unified diff text
    - side-by-side: Paired original/modified rows
    - inline: Line entries with character ranges for edited lines
    - stats-only: Just statistics and similarity

    Options:
    - mode: line, word or character (default from config, 'line')
    - name1/name2: Headers for the unified format
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'success': False, 'error': 'Invalid JSON format'}), 400

        if 'text1' not in data or 'text2' not in data:
            return jsonify({'success': False, 'error': 'Missing text1 or text2'}), 400

        settings = _settings()
        text1 = data['text1']
        text2 = data['text2']

        limit = settings.get('max_input_length', 0)
        if _too_long(text1, limit) or _too_long(text2, limit):
            logger.warning("Rejected diff request over %d characters", limit)
            return jsonify({
                'success': False,
                'error': f'Input too large. Maximum length is {limit} characters per text'
            }), 413

        result = compare_texts(
            text1,
            text2,
            mode=data.get('mode', settings['default_mode']),
            output_format=data.get('format', 'json'),
            name1=data.get('name1', settings['original_name']),
            name2=data.get('name2', settings['modified_name']),
        )

        if result['success']:
            return jsonify(result)
        logger.warning("Rejected diff request: %s", result['error'])
        return jsonify(result), 400

    except Exception as e:
        logger.exception("Text diff comparison failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
