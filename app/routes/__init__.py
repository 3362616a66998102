# Routes package init
"""
ParamBinder Backend — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - request_param.py:  /request-param-*, /model-attribute-*  (binding demos)
    - health.py:         GET /health                           (health check)

Design Principle:
    Routes are THIN: binding is declared through app.dependencies and
    resolved by app.services.param_binder; routes only log and answer.
"""
