from .gateway import AuthGateway, LocalAuthGateway

__all__ = ["AuthGateway", "LocalAuthGateway"]
