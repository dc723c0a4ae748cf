class StatdashError(Exception):
    pass


class LoadError(StatdashError):
    pass


class ValidationError(StatdashError):
    pass


class EmptyDataError(StatdashError):
    pass


class InvalidInputError(StatdashError):
    pass


class InvalidColumnError(InvalidInputError):
    def __init__(self, column: str):
        super().__init__(f'Column "{column}" does not exist in the dataset')
        self.column = column


class UnknownAnalysisError(InvalidInputError):
    def __init__(self, kind: str):
        super().__init__(f"Unknown analysis type: {kind}")
        self.kind = kind
