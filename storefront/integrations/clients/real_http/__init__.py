"""
Real HTTP integration clients.

These clients communicate with the hosted storefront backend via HTTP:
- ApiClient: REST calls and the health endpoint
- EmailClient: transactional email endpoint
- PaymentsClient: command-oriented payment endpoint

Important:
- Must return data shaped according to storefront/integrations/contracts/*
- Must raise storefront.errors types, never raw httpx exceptions

Switching:
Selection of remote vs local data happens per call in the domain services;
the clients themselves are wired once in storefront/bootstrap.py.
"""

from .api_client import ApiClient
from .email import EmailClient
from .payments import PaymentsClient

__all__ = ["ApiClient", "EmailClient", "PaymentsClient"]
