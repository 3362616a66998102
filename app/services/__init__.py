# Services package init
"""
ParamBinder Backend — Services Layer
=====================================

What:  Logic that does not depend on HTTP.

Service Inventory:
    - ParamBinder: resolves BindingSpecs against RawParameters

Why services are separate from routes:
    The binder can be unit-tested with plain RawParameters values,
    without building requests or running an app.
"""
