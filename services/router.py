"""
API router: the static table of named content operations.

All operations are registered here by hand. Every handler takes the acting
user and a request payload dict and returns a JSON-serialisable dict.
"""

from functools import partial

from services.create_post import generate_social_post
from services.update_post import update_social_post

APP_ROUTER = {
    "createPost": generate_social_post,
    "updatePost": update_social_post,
}


class UnknownOperationError(KeyError):
    """Raised when an operation name is not in the router table."""

    pass


def get_operation(name, router=APP_ROUTER):
    try:
        return router[name]
    except KeyError:
        raise UnknownOperationError(name) from None


class Caller:
    """
    Server-side caller bound to one user.

    Example:
        caller = create_caller(current_user)
        result = caller.updatePost({...})
    """

    def __init__(self, user, router=APP_ROUTER):
        self._user = user
        self._router = router

    def call(self, name, payload):
        return get_operation(name, self._router)(self._user, payload)

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            handler = get_operation(name, self._router)
        except UnknownOperationError:
            raise AttributeError(name) from None
        return partial(handler, self._user)


def create_caller(user, router=APP_ROUTER):
    """Create a server-side caller for the router."""
    return Caller(user, router)
