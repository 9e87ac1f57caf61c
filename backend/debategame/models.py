from datetime import datetime, timezone

from debategame import db

DEBATE_PRIVATE = 'PRIVATE'
DEBATE_PUBLIC = 'PUBLIC'


def utcnow():
    return datetime.now(timezone.utc)


def _iso(value):
    return value.isoformat() if value else None


debate_participants = db.Table(
    'debate_participants',
    db.Column('debate_id', db.Integer, db.ForeignKey('debate.id'), primary_key=True),
    db.Column('user_id', db.Integer, db.ForeignKey('user.id'), primary_key=True),
)


class User(db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    debates = db.relationship('Debate', secondary=debate_participants, back_populates='participants')
    arguments = db.relationship('Argument', back_populates='author', order_by='Argument.id')

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'created_at': _iso(self.created_at),
            'updated_at': _iso(self.updated_at),
        }


class Debate(db.Model):
    __tablename__ = 'debate'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(256), nullable=False)
    debate_type = db.Column(db.String(16), nullable=False, default=DEBATE_PRIVATE)  # PRIVATE, PUBLIC
    author_username = db.Column(db.String(64), db.ForeignKey('user.username'), nullable=False)
    # Turn holder; only meaningful for private debates
    turn_username = db.Column(db.String(64), db.ForeignKey('user.username'), nullable=False)
    # Bumped on every turn advancement, used for compare-and-swap updates
    turn_version = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    participants = db.relationship('User', secondary=debate_participants, back_populates='debates', order_by='User.id')
    arguments = db.relationship('Argument', back_populates='debate', order_by='Argument.id')

    def participant_usernames(self):
        return [p.username for p in self.participants]

    def to_dict(self, include_relations=False):
        payload = {
            'id': self.id,
            'title': self.title,
            'debate_type': self.debate_type,
            'author_username': self.author_username,
            'turn_username': self.turn_username,
            'turn_version': self.turn_version,
            'created_at': _iso(self.created_at),
            'updated_at': _iso(self.updated_at),
        }
        if include_relations:
            payload['participants'] = [p.to_dict() for p in self.participants]
            payload['arguments'] = [a.to_dict() for a in self.arguments]
        return payload


class Argument(db.Model):
    __tablename__ = 'argument'
    id = db.Column(db.Integer, primary_key=True)
    content = db.Column(db.Text, nullable=False)
    author_username = db.Column(db.String(64), db.ForeignKey('user.username'), nullable=False)
    debate_id = db.Column(db.Integer, db.ForeignKey('debate.id'), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=True)  # 0-100, null when judging failed
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    debate = db.relationship('Debate', back_populates='arguments')
    author = db.relationship('User', back_populates='arguments')

    def to_dict(self):
        return {
            'id': self.id,
            'content': self.content,
            'author_username': self.author_username,
            'debate_id': self.debate_id,
            'score': self.score,
            'created_at': _iso(self.created_at),
            'updated_at': _iso(self.updated_at),
        }
