class StatementReadError(Exception):
    """The statement file could not be turned into text."""

    def __init__(self, file: str, reason: str):
        super().__init__(f'Unable to read statement {file}: {reason}')
        self.file = file
        self.reason = reason


class EncryptedStatementError(StatementReadError):
    def __init__(self, file: str):
        super().__init__(file, 'document is encrypted')
