"""Exceptions raised by the phpgen model.

Both kinds are raised synchronously by accessors on the model; rendering
itself never raises for a model built through those accessors.
"""


class ValidationError(ValueError):
    """Raised when a setter receives a malformed name or a wrong member type.

    The model is left unchanged when this is raised.

    Example:
        try:
            ClassType("Foo\\Bar")
        except ValidationError:
            print("Class names cannot contain namespace separators")
    """

    pass


class NotFoundError(LookupError):
    """Raised by lookup accessors when the requested member is absent.

    Example:
        try:
            cls.get_method("missing")
        except NotFoundError as exc:
            print(f"No method named {exc.name}")
    """

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} '{name}' not found.")
