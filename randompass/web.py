import logging

from flask import Flask, jsonify, request

from .errors import ValidationError
from .generator import generate
from .models import DEFAULT_COUNT, DEFAULT_LENGTH, GenerationRequest

logger = logging.getLogger(__name__)

app = Flask(__name__)
# keep "Password <i>" labels in generation order
app.json.sort_keys = False

_FLAGS = ("exclude_uppercase", "exclude_lowercase", "exclude_numbers", "exclude_specials")


@app.route('/')
def home():
    return jsonify({
        "message": "randompass API is running"
    })


@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({'error': 'request body must be a JSON object'}), 400
    try:
        count = int(data.get('count', DEFAULT_COUNT))
        length = int(data.get('length', DEFAULT_LENGTH))
    except (TypeError, ValueError):
        return jsonify({'error': 'count and length must be integers'}), 400

    specials = data.get('specials')
    if specials is not None and not isinstance(specials, str):
        return jsonify({'error': 'specials must be a string'}), 400

    # JSON booleans only; strings like "false" are rejected
    flags = {flag: data.get(flag, False) for flag in _FLAGS}
    exportable = data.get('exportable', False)
    for name, value in list(flags.items()) + [('exportable', exportable)]:
        if not isinstance(value, bool):
            return jsonify({'error': f'{name} must be true or false'}), 400

    gen_request = GenerationRequest.from_exclusions(
        count=count,
        length=length,
        specials=specials,
        **flags,
    )
    try:
        result = generate(gen_request, exportable=exportable)
    except ValidationError as e:
        return jsonify({'error': str(e)}), 400

    for w in result.warnings:
        logger.warning(w)
    return jsonify({'passwords': result.output, 'warnings': result.warnings})


if __name__ == "__main__":
    app.run(debug=True)
