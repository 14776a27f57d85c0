import logging
from datetime import datetime

from flask import Flask, jsonify, render_template_string

from textdiff import __version__
from textdiff.blueprints.text_diff import text_diff_bp
from textdiff.config.template import DASHBOARD_TEMPLATE
from textdiff.config.tools import get_enabled_tools, get_text_diff_settings, load_config

logger = logging.getLogger(__name__)


def create_app(config=None) -> Flask:
    """Build the Flask application with the text diff blueprint registered."""
    if config is None:
        config = load_config()

    app = Flask(__name__)
    app.config['TOOLS_CONFIG'] = config
    app.config['TEXT_DIFF'] = get_text_diff_settings(config)
    app.register_blueprint(text_diff_bp)

    @app.route('/')
    def dashboard():
        return render_template_string(DASHBOARD_TEMPLATE, tools=get_enabled_tools(app.config['TOOLS_CONFIG']))

    @app.route('/api/tools')
    def api_tools():
        return jsonify({'tools': get_enabled_tools(app.config['TOOLS_CONFIG'])})

    @app.route('/health')
    def health():
        return jsonify({
            'status': 'healthy',
            'version': __version__,
            'timestamp': datetime.now().isoformat(),
            'tools_count': len(get_enabled_tools(app.config['TOOLS_CONFIG'])),
        })

    logger.debug("Text diff settings: %s", app.config['TEXT_DIFF'])
    return app


app = create_app()


if __name__ == '__main__':
    app.run(host='127.0.0.1', port=8000, debug=True)
