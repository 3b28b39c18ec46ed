class ExpressionError(ValueError):
    """
    Base class for every error detected while compiling a find expression.

    Expression errors are always raised before any filesystem entry is evaluated,
    so no action (printing, command execution) has run when one is reported.

    Example:
        >>> error = ExpressionError("invalid expression")
        >>> isinstance(error, ValueError)
        True
    """

    pass


class MissingArgumentError(ExpressionError):
    """
    Exception raised when a test or action is the last token but needs an argument.

    Attributes:
        flag (str): The flag that is missing its argument.

    Example:
        >>> str(MissingArgumentError("-name"))
        'missing argument to -name'
    """

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"missing argument to {flag}")


class MissingExpressionError(ExpressionError):
    """
    Exception raised when an operator is not followed by an expression.

    This covers ``-not``/``!`` as well as the binary operators when they are the
    last token or are immediately followed by a closing parenthesis.

    Attributes:
        flag (str): The dangling operator.

    Example:
        >>> str(MissingExpressionError("-o"))
        'expected an expression after -o'
    """

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"expected an expression after {flag}")


class BinaryOperatorError(ExpressionError):
    """
    Exception raised when a binary operator has nothing on its left-hand side.

    Attributes:
        operator (str): The operator as it appeared on the command line.

    Example:
        >>> str(BinaryOperatorError(","))
        "invalid expression; you have used a binary operator ',' with nothing before it."
    """

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"invalid expression; you have used a binary operator '{operator}' with nothing before it.")


class UnbalancedParenthesesError(ExpressionError):
    """
    Exception raised when opening and closing parentheses do not pair up.

    Example:
        >>> str(UnbalancedParenthesesError.too_many_closing())
        "you have too many ')'"
    """

    @classmethod
    def too_many_closing(cls) -> "UnbalancedParenthesesError":
        return cls("you have too many ')'")

    @classmethod
    def missing_closing(cls) -> "UnbalancedParenthesesError":
        return cls("invalid expression; I was expecting to find a ')' somewhere but did not see one.")


class UnrecognizedFlagError(ExpressionError):
    """
    Exception raised for a token that is neither an operator, a test nor an action.

    Attributes:
        flag (str): The unrecognized token.

    Example:
        >>> str(UnrecognizedFlagError("-bogus"))
        "Unrecognized flag: '-bogus'"
    """

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Unrecognized flag: '{flag}'")


class InvalidArgumentError(ExpressionError):
    """
    Exception raised when a test or action receives an argument it cannot use.

    Example:
        >>> str(InvalidArgumentError("Unknown argument to -type: x"))
        'Unknown argument to -type: x'
    """

    pass
