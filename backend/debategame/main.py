from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from debategame import db
from debategame.models import User
from debategame.services.debates.errors import BadRequest, Conflict, Internal, NotFound
from debategame.services.debates.turns import find_user

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Debate Game server!'})


@main.route('/users', methods=['POST'])
def add_user():
    data = request.get_json(silent=True) or {}
    username = data.get('username')
    if not isinstance(username, str) or not username.strip():
        raise BadRequest('username is required')
    # Must stay addressable as GET /users/<username>
    if '/' in username:
        raise BadRequest('username must not contain "/"')

    if find_user(username) is not None:
        current_app.logger.warning(f"[user-create] username={username} already exists")
        raise Conflict('User already exists')

    user = User(username=username)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name
        db.session.rollback()
        current_app.logger.warning(f"[user-create] username={username} already exists")
        raise Conflict('User already exists')
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[user-create] username={username} error={exc}")
        raise Internal('Error creating user') from exc
    current_app.logger.info(f"[user-create] username={username}")
    return jsonify({'data': {'user': user.to_dict()}}), 201


@main.route('/users/<string:username>', methods=['GET'])
def get_user(username):
    user = find_user(username)
    if user is None:
        current_app.logger.warning(f"[user-query] username={username} not found")
        raise NotFound('User not found')
    return jsonify({'data': {'user': user.to_dict()}})
