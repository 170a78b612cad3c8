"""
Bearer token verification strategies. The auth service depends only on
TokenVerifier; the concrete verifier is picked by strategy_factory.
"""

from .token_verifier import AuthenticationError, Identity, TokenVerifier
from .mock_verifier import MockTokenVerifier

__all__ = ['AuthenticationError', 'Identity', 'TokenVerifier', 'MockTokenVerifier']
