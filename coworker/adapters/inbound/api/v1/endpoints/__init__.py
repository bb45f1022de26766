# coworker/adapters/inbound/api/v1/endpoints/__init__.py

from coworker.adapters.inbound.api.v1.endpoints import member_endpoint, session_endpoint, user_endpoint

__all__ = ["member_endpoint", "session_endpoint", "user_endpoint"]
