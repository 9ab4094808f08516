"""Decorators for KeyEchoApp actions."""

from functools import wraps

from keyecho.exceptions import handle_errors


def handle_action_errors(operation_name: str):
    """
    Report a failing action as an error toast instead of crashing the app.

    Example:
        @handle_action_errors("save difficulty")
        def action_save_difficulty(self):
            ...
    """
    def decorator(method):
        @wraps(method)
        def wrapper(self, *args, **kwargs):
            guarded = handle_errors(
                operation_name=operation_name,
                user_notification=lambda text: self.notify(text, severity="error", timeout=5),
                re_raise=False,
            )(method)
            return guarded(self, *args, **kwargs)
        return wrapper
    return decorator
