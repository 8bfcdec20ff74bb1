"""
OAuth redirect middleware.

Wraps an application's update function so that every navigation event
is first checked for an implicit grant redirect. The wrapped function
stays pure: it returns the new state plus the effects requested by the
authorization callback and by the update function, in that order.

Flow:
1. Navigation event arrives (Location or URL string)
2. Fragment is parsed and validated
3. Authorization redirect -> on_authorize(result, state)
4. Event is passed unmodified to update(event, state)
"""

from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from dropbox_http.core.logging import logger
from dropbox_http.models.auth import AuthorizeOk, AuthorizeResult
from dropbox_http.models.http import Location
from dropbox_http.services.oauth import authorize_result_from_fragment

State = TypeVar("State")

NavigationEvent = Location | str
Transition = tuple[State, Sequence[Any]]
Update = Callable[[NavigationEvent, State], Transition]
OnAuthorize = Callable[[AuthorizeResult, State], Transition]


class RedirectMiddleware(Generic[State]):
    """
    Middleware that detects Dropbox authorization redirects.

    Attributes:
        update: Regular application update function
        on_authorize: Callback receiving AuthorizeOk or AuthorizeErr
    """

    def __init__(self, update: Update, on_authorize: OnAuthorize):
        """
        Initialize the middleware.

        Args:
            update: Function (event, state) -> (state, effects)
            on_authorize: Function (result, state) -> (state, effects)
        """
        self.update = update
        self.on_authorize = on_authorize

    def __call__(
        self, event: NavigationEvent, state: State
    ) -> tuple[State, list[Any]]:
        """
        Processes a navigation event.

        Args:
            event: New browser location or URL
            state: Current application state

        Returns:
            New state and the list of pending effects
        """
        location = event if isinstance(event, Location) else Location.from_url(event)
        result = authorize_result_from_fragment(location)

        effects: list[Any] = []
        if result is not None:
            if isinstance(result, AuthorizeOk):
                logger.info(f"Dropbox authorization received for uid {result.uid}")
            else:
                logger.warning(f"Dropbox authorization failed: {result.error}")
            state, auth_effects = self.on_authorize(result, state)
            effects.extend(auth_effects)

        state, update_effects = self.update(event, state)
        effects.extend(update_effects)
        return state, effects


def with_authorization(
    on_authorize: OnAuthorize,
) -> Callable[[Update], RedirectMiddleware]:
    """
    Decorator form of RedirectMiddleware.

    Usage:
        @with_authorization(handle_auth)
        def update(event, state):
            return state, []

    Args:
        on_authorize: Callback receiving the authorization result

    Returns:
        Decorator wrapping an update function
    """

    def decorator(update: Update) -> RedirectMiddleware:
        return RedirectMiddleware(update, on_authorize)

    return decorator
