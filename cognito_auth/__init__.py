"""
Cognito auth package for FastAPI applications.

Forwards signup, signin, password reset and signout requests to an
AWS Cognito user pool and relays the outcome back to the caller.
"""

__version__ = "0.1.0"
