from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from debategame import db
from debategame.models import Argument
from .errors import DebateError, Forbidden, Internal, NotFound
from .judge import JudgeError
from .turns import (
    advance_turn,
    commit_or_fail,
    find_user,
    get_private_debate,
    get_public_debate,
    other_participant,
)


def current_judge():
    return current_app.extensions['argument_judge']


def submit_private_argument(debate_id, content, author_username):
    """Accept an argument from the turn holder and pass the turn on.

    Creating the argument, linking it and advancing the turn commit together,
    so a failure part way through leaves nothing behind. Scoring happens after
    the commit and never fails the submission.
    """
    debate = get_private_debate(debate_id)

    if debate.turn_username != author_username:
        current_app.logger.warning(
            f"[argument-rejected] debate={debate.id} author={author_username} turn={debate.turn_username}"
        )
        raise Forbidden('User is not allowed to post an argument')

    holder = debate.turn_username
    version = debate.turn_version
    next_holder = other_participant(debate, holder)
    author = next(p for p in debate.participants if p.username == holder)
    previous_content = _latest_content(debate)

    argument = _persist_argument(debate, author, content)
    try:
        advance_turn(debate.id, holder, version, next_holder)
    except DebateError:
        db.session.rollback()
        raise
    commit_or_fail('argument-create', 'Error creating argument')

    current_app.logger.info(
        f"[argument-accepted] debate={debate_id} argument={argument.id} author={holder} "
        f"turn={next_holder} version={version + 1}"
    )
    return _attach_score(argument, previous_content)


def submit_public_argument(debate_id, content, author_username):
    """Accept an argument on a public debate; anyone may post at any time."""
    debate = get_public_debate(debate_id)
    author = find_user(author_username)
    if author is None:
        current_app.logger.warning(f"[argument-rejected] debate={debate.id} author={author_username} not found")
        raise NotFound('User not found')

    previous_content = _latest_content(debate)
    argument = _persist_argument(debate, author, content)
    commit_or_fail('argument-create', 'Error creating argument')

    current_app.logger.info(
        f"[argument-accepted] debate={debate_id} argument={argument.id} author={author.username}"
    )
    return _attach_score(argument, previous_content)


def _latest_content(debate):
    return debate.arguments[-1].content if debate.arguments else None


def _flush_or_fail(tag, message):
    try:
        db.session.flush()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[{tag}] error={exc}")
        raise Internal(message) from exc


def _persist_argument(debate, author, content):
    """Create the argument and link it to its debate and author. No commit."""
    argument = Argument(content=content, author_username=author.username, debate_id=debate.id)
    db.session.add(argument)
    _flush_or_fail('argument-create', 'Error creating argument')

    debate.arguments.append(argument)
    _flush_or_fail('argument-link-debate', 'Error connecting argument to debate')

    author.arguments.append(argument)
    _flush_or_fail('argument-link-user', 'Error connecting argument to user')
    return argument


def _attach_score(argument, previous_content):
    judge = current_judge()
    try:
        score = judge.score_argument(argument.content, previous_content)
    except JudgeError as exc:
        current_app.logger.warning(f"[judge] argument={argument.id} judge={judge.name} unscored: {exc}")
        return argument

    argument.score = score
    try:
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[judge] argument={argument.id} failed to store score error={exc}")
        return argument
    current_app.logger.info(f"[judge] argument={argument.id} judge={judge.name} score={score}")
    return argument
