from flask import Blueprint, jsonify, request

from debategame.services.debates.errors import BadRequest
from debategame.services.debates.submission import submit_private_argument, submit_public_argument
from debategame.services.debates.turns import (
    create_private_debate,
    create_public_debate,
    get_private_debate,
    get_public_debate,
)

debates = Blueprint('debates', __name__)


def _required(data, *fields):
    values = []
    for field in fields:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise BadRequest(f'{field} is required')
        values.append(value)
    return values


def _argument_fields():
    data = request.get_json(silent=True) or {}
    argument = data.get('argument')
    if not isinstance(argument, dict):
        raise BadRequest('argument is required')
    return _required(argument, 'content', 'authorUsername')


@debates.route('/private', methods=['POST'])
def new_private_debate():
    data = request.get_json(silent=True) or {}
    title, opponent, author = _required(data, 'title', 'opponent', 'authorUsername')
    debate = create_private_debate(author, opponent, title)
    return jsonify({'data': {'debate': debate.to_dict(include_relations=True)}}), 201


@debates.route('/private/<int:debate_id>', methods=['GET'])
def private_debate(debate_id):
    debate = get_private_debate(debate_id)
    return jsonify({'data': {'debate': debate.to_dict(include_relations=True)}})


@debates.route('/private/<int:debate_id>/arguments', methods=['POST'])
def post_private_argument(debate_id):
    content, author = _argument_fields()
    argument = submit_private_argument(debate_id, content, author)
    return jsonify({'data': {'argument': argument.to_dict()}}), 201


@debates.route('/public', methods=['POST'])
def new_public_debate():
    data = request.get_json(silent=True) or {}
    title, author = _required(data, 'title', 'authorUsername')
    debate = create_public_debate(author, title)
    return jsonify({'data': {'debate': debate.to_dict(include_relations=True)}}), 201


@debates.route('/public/<int:debate_id>', methods=['GET'])
def public_debate(debate_id):
    debate = get_public_debate(debate_id)
    return jsonify({'data': {'debate': debate.to_dict(include_relations=True)}})


@debates.route('/public/<int:debate_id>/arguments', methods=['POST'])
def post_public_argument(debate_id):
    content, author = _argument_fields()
    argument = submit_public_argument(debate_id, content, author)
    return jsonify({'data': {'argument': argument.to_dict()}}), 201
