class GameError(Exception):
    pass


class LogicError(GameError):
    pass


class InvalidCoordinateError(GameError):
    pass


class GameAbortedError(GameError):
    pass
