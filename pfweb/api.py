import logging

from flask import Flask, jsonify, request
from passforge.errors import GenerationFailedError, InvalidConfigError
from passforge.generator import GeneratorConfig, generate_many
from passforge.score import estimate_entropy, score_password

logger = logging.getLogger(__name__)

app = Flask(__name__)

@app.errorhandler(InvalidConfigError)
def invalid_config(e):
    return jsonify({'error': str(e)}), 400

@app.errorhandler(GenerationFailedError)
def generation_failed(e):
    logger.warning("generation failed: %s", e)
    return jsonify({'error': str(e)}), 503

@app.route('/')
def home():
    return jsonify({
        "message": "passforge API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'request body must be a JSON object'}), 400
    config = GeneratorConfig.from_flags(
        length=data.get('length', 16),
        upper=data.get('upper', True),
        lower=data.get('lower', True),
        digits=data.get('digits', True),
        special=data.get('special', data.get('symbols', True)),
        exclude_ambiguous=data.get('exclude_ambiguous', False),
    )
    passwords = generate_many(config, data.get('count', 1))
    return jsonify({
        'password': passwords[0],
        'passwords': passwords,
        'strength': score_password(passwords[0]),
        'entropy_bits': round(estimate_entropy(config), 1),
    })

@app.route('/score', methods=['POST'])
def score_route():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'request body must be a JSON object'}), 400
    password = data.get('password', '')
    if not isinstance(password, str):
        return jsonify({'error': 'password must be a string'}), 400
    result = score_password(password)
    return jsonify(result)

if __name__ == "__main__":
    app.run(debug=True)
