"""API layer for authentication, SObject records, and Apex REST resources."""

from .apex_api import ApexAPI
from .auth_api import AuthAPI
from .sobject_api import SObjectAPI

__all__ = ["AuthAPI", "SObjectAPI", "ApexAPI"]
