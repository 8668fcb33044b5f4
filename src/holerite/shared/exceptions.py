"""Custom exceptions for Holerite."""

FieldErrors = dict[str, list[str]]


class HoleriteError(Exception):
    """Base exception for all Holerite errors."""

    pass


class ParseError(HoleriteError):
    """Error reading a payroll input file."""

    pass


class UnsupportedFileError(ParseError):
    """File format not supported."""

    pass


class ValidationError(HoleriteError):
    """One or more field-level constraint violations.

    Carries every violation found, keyed by field name, so callers can
    report them all at once.
    """

    def __init__(self, errors: FieldErrors, message: str = "Campo(s) inválido(s)"):
        super().__init__(message)
        self.errors = errors

    def __str__(self) -> str:
        detalhes = "; ".join(
            f"{campo}: {', '.join(mensagens)}" for campo, mensagens in self.errors.items()
        )
        return f"{self.args[0]} - {detalhes}" if detalhes else self.args[0]


class RecordNotFoundError(HoleriteError):
    """Requested payroll record does not exist or was deleted."""

    def __init__(self, entity: str, key: object):
        super().__init__(f"{entity} com chave '{key}' não encontrado")
        self.entity = entity
        self.key = key


class DuplicateRecordError(HoleriteError):
    """A record with the same business key already exists."""

    def __init__(self, entity: str, key: object):
        super().__init__(f"{entity} com chave '{key}' já existe")
        self.entity = entity
        self.key = key
