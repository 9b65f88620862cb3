class CurveError(Exception):
    pass


class DivisionByZero(CurveError, ZeroDivisionError):
    pass


class DomainMismatch(CurveError, TypeError):
    pass


class NotOnCurve(CurveError, ValueError):
    pass
