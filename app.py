import logging

from flask import Flask, jsonify
from flask_compress import Compress
from werkzeug.exceptions import HTTPException

from config import settings
from routes.api import ALL_BLUEPRINTS

logger = logging.getLogger(__name__)


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.update(settings.flask_config())

    # Gzip/Brotli compression for JSON responses
    app.config['COMPRESS_ALGORITHM'] = ['br', 'gzip']
    app.config['COMPRESS_MIMETYPES'] = ['application/json']

    if overrides:
        app.config.update(overrides)

    # Keep response keys in insertion order (weather, airQuality, sunTimes)
    app.json.sort_keys = False

    Compress(app)

    for bp in ALL_BLUEPRINTS:
        app.register_blueprint(bp)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'message': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception(f'Unhandled error: {e}')
        return jsonify({'message': 'Internal Server Error'}), 500

    return app


app = create_app()

if __name__ == '__main__':
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app.run(host=settings.host, port=settings.port, debug=False, threaded=True)
