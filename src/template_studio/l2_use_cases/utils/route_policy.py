"""Pure functions for route protection."""

from __future__ import annotations

from collections.abc import Sequence

from template_studio.l1_entities.route_access import AuthState, NavigationDecision, RouteAccess

PROTECTED_PREFIXES: tuple[str, ...] = (
    '/dashboard',
    '/editor',
    '/images',
    '/templates',
    '/designs',
    '/profile',
)
PUBLIC_PREFIXES: tuple[str, ...] = ('/auth', '/login', '/signup')

LOGIN_PATH = '/auth'
HOME_PATH = '/dashboard'


def classify(
    pathname: str,
    protected_prefixes: Sequence[str] = PROTECTED_PREFIXES,
    public_prefixes: Sequence[str] = PUBLIC_PREFIXES,
) -> RouteAccess:
    """Classify *pathname* by plain prefix match. Protected wins over public."""
    if any(pathname.startswith(p) for p in protected_prefixes):
        return RouteAccess.PROTECTED
    if any(pathname.startswith(p) for p in public_prefixes):
        return RouteAccess.PUBLIC
    return RouteAccess.NEUTRAL


def decide_navigation(
    access: RouteAccess,
    auth: AuthState,
    *,
    login_path: str = LOGIN_PATH,
    home_path: str = HOME_PATH,
) -> NavigationDecision:
    """Caller-side decision table over (classification, auth state).

    While auth is still loading nothing is redirected; the UI shows its own
    pending state and asks again once loading settles.
    """
    if auth.loading:
        return NavigationDecision(allow=True)
    if access == RouteAccess.PROTECTED and not auth.signed_in:
        return NavigationDecision(allow=False, redirect_to=login_path)
    if access == RouteAccess.PUBLIC and auth.signed_in:
        return NavigationDecision(allow=False, redirect_to=home_path)
    return NavigationDecision(allow=True)
