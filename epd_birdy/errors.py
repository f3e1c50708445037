class EvaluationError(ValueError):
    """
    Raised when a reference value evaluation cannot produce a meaningful result.
    Carries the name of the offending parameter.
    """
    parameter = None

    def __init__(self, message, parameter=None):
        super().__init__(message)
        self.message = message
        if parameter is not None:
            self.parameter = parameter

    def __str__(self):
        return f"{self.message} (parameter: {self.parameter})"


class MissingEPD(EvaluationError):
    parameter = "epd"


class InvalidReferenceValue(EvaluationError):
    parameter = "reference_value"


class MissingOrZeroQuantityTypeValue(EvaluationError):
    parameter = "quantity_type_value"
