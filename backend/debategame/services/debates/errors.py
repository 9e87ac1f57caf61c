"""Domain errors raised by the debate services.

Each error carries the HTTP status the API layer answers with, so routes
never have to map exceptions by hand.
"""


class DebateError(Exception):
    status_code = 500
    error = 'Internal server error'

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.error, 'message': self.message}


class BadRequest(DebateError):
    status_code = 400
    error = 'Bad request'


class Forbidden(DebateError):
    status_code = 403
    error = 'Forbidden'


class NotFound(DebateError):
    status_code = 404
    error = 'Not found'


class Conflict(DebateError):
    status_code = 409
    error = 'Conflict'


class Internal(DebateError):
    pass
