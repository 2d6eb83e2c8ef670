"""Interface layer DI providers."""

from dishka import Scope, provide

from specdit.config import AuthSettings
from specdit.domain.service import JWTService, UserService
from specdit.interface.api.dependencies import Authenticator
from specdit.persistence.database import TransactionOutcome
from specdit.util.di.base import ProviderBase


class ProdInterfaceProvider(ProviderBase):
    """Production HTTP helpers provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_authenticator(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> Authenticator:
        """Provide request authenticator."""
        return Authenticator(
            jwt_service=jwt_service,
            user_service=user_service,
            auth_settings=auth_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_transaction_outcome(self) -> TransactionOutcome:
        """Provide the outcome the error handler reports to the request session."""
        return TransactionOutcome()
