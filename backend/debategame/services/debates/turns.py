from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from debategame import db
from debategame.models import DEBATE_PRIVATE, DEBATE_PUBLIC, Debate, User, utcnow
from .errors import BadRequest, Conflict, Internal, NotFound

PRIVATE_PARTICIPANTS = 2


def find_user(username):
    try:
        return User.query.filter_by(username=username).first()
    except SQLAlchemyError as exc:
        current_app.logger.error(f"[user-query] username={username} error={exc}")
        raise Internal('Error querying user') from exc


def commit_or_fail(tag, message):
    try:
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[{tag}] error={exc}")
        raise Internal(message) from exc


def create_private_debate(author_username, opponent_username, title):
    """Open a private debate between two existing users.

    The author holds the first turn.
    """
    author = find_user(author_username)
    if author is None:
        current_app.logger.warning(f"[debate-create] author={author_username} not found")
        raise NotFound('Author not found')

    opponent = find_user(opponent_username)
    if opponent is None:
        current_app.logger.warning(f"[debate-create] opponent={opponent_username} not found")
        raise NotFound('Opponent not found')

    if author.id == opponent.id:
        raise BadRequest('A private debate needs two different participants')

    debate = Debate(
        title=title,
        debate_type=DEBATE_PRIVATE,
        author_username=author.username,
        turn_username=author.username,
        turn_version=0,
        participants=[author, opponent],
    )
    db.session.add(debate)
    commit_or_fail('debate-create', 'Error creating debate')
    current_app.logger.info(
        f"[debate-create] debate={debate.id} type=PRIVATE author={author.username} opponent={opponent.username}"
    )
    return debate


def create_public_debate(author_username, title):
    author = find_user(author_username)
    if author is None:
        current_app.logger.warning(f"[debate-create] author={author_username} not found")
        raise NotFound('Author not found')

    debate = Debate(
        title=title,
        debate_type=DEBATE_PUBLIC,
        author_username=author.username,
        turn_username=author.username,
        turn_version=0,
        participants=[author],
    )
    db.session.add(debate)
    commit_or_fail('debate-create', 'Error creating debate')
    current_app.logger.info(f"[debate-create] debate={debate.id} type=PUBLIC author={author.username}")
    return debate


def get_debate(debate_id, debate_type):
    """Load a debate of the given type, or raise NotFound."""
    try:
        debate = Debate.query.filter_by(id=debate_id).first()
    except SQLAlchemyError as exc:
        current_app.logger.error(f"[debate-query] debate={debate_id} error={exc}")
        raise Internal('Error querying debate') from exc
    if debate is None or debate.debate_type != debate_type:
        current_app.logger.warning(f"[debate-query] debate={debate_id} type={debate_type} not found")
        raise NotFound('Debate not found')
    return debate


def get_private_debate(debate_id):
    return get_debate(debate_id, DEBATE_PRIVATE)


def get_public_debate(debate_id):
    return get_debate(debate_id, DEBATE_PUBLIC)


def other_participant(debate, holder):
    """Return the username that takes the turn after ``holder``.

    Only defined for exactly two participants; anything else is a broken
    private debate and is rejected.
    """
    usernames = debate.participant_usernames()
    if len(usernames) != PRIVATE_PARTICIPANTS:
        current_app.logger.error(
            f"[turn] debate={debate.id} has {len(usernames)} participants, expected {PRIVATE_PARTICIPANTS}"
        )
        raise Internal('Debate does not have exactly two participants')
    others = [u for u in usernames if u != holder]
    if len(others) != 1:
        current_app.logger.error(f"[turn] debate={debate.id} holder={holder} is not a participant")
        raise Internal('Turn holder is not a participant of this debate')
    return others[0]


def advance_turn(debate_id, expected_holder, expected_version, next_holder):
    """Compare-and-swap the turn holder inside the current transaction.

    Does not commit. Raises Conflict when another submission advanced the
    turn first, Internal when the debate is gone.
    """
    try:
        updated = Debate.query.filter_by(
            id=debate_id,
            turn_username=expected_holder,
            turn_version=expected_version,
        ).update(
            {
                Debate.turn_username: next_holder,
                Debate.turn_version: Debate.turn_version + 1,
                Debate.updated_at: utcnow(),
            },
            synchronize_session=False,
        )
    except SQLAlchemyError as exc:
        current_app.logger.error(f"[turn] debate={debate_id} update failed error={exc}")
        raise Internal('Error updating debate') from exc

    if updated == 1:
        return
    if Debate.query.filter_by(id=debate_id).first() is None:
        current_app.logger.error(f"[turn] debate={debate_id} vanished before turn advancement")
        raise Internal('Error updating debate')
    current_app.logger.warning(
        f"[turn] debate={debate_id} stale turn holder={expected_holder} version={expected_version}"
    )
    raise Conflict('The turn has already been taken')
