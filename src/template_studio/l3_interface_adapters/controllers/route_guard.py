"""RouteGuard — applies the route policy with configured prefixes."""

from __future__ import annotations

from template_studio.l1_entities.config import RoutesConfig
from template_studio.l1_entities.route_access import AuthState, NavigationDecision, RouteAccess
from template_studio.l2_use_cases.utils.route_policy import classify, decide_navigation


class RouteGuard:
    def __init__(self, config: RoutesConfig) -> None:
        self._config = config

    def classify(self, pathname: str) -> RouteAccess:
        return classify(pathname, self._config.protected_prefixes, self._config.public_prefixes)

    def decide(self, pathname: str, auth: AuthState) -> NavigationDecision:
        return decide_navigation(
            self.classify(pathname),
            auth,
            login_path=self._config.login_path,
            home_path=self._config.home_path,
        )
