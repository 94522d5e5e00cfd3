class RecordDecoratorError(Exception):
    """
    Base class for record decorator errors
    """


class InvalidModel(RecordDecoratorError):
    """
    Raised by the raising save/update variants when the decorated record could not be saved
    """
    def __init__(self, errors, *args: object) -> None:
        self.errors = errors
        super().__init__('Validation failed: %s' % ','.join(errors.full_messages()), *args)


class UnknownCallbackHook(RecordDecoratorError, ValueError):
    """
    Raised when registering a callback against a hook name that does not exist
    """
    def __init__(self, hook: str, *args: object) -> None:
        super().__init__('Unknown callback hook: %s' % hook, *args)


class NotDecoratable(RecordDecoratorError, TypeError):
    """
    Raised when a decorator is constructed around an object that is not a decorated record
    """
    def __init__(self, record: object, *args: object) -> None:
        super().__init__(
            'Object of type %s does not provide save, destroy, is_valid, is_persisted and errors'
            % type(record).__name__,
            *args
        )
