"""
Application package initializer.

This package contains the directory API and its submodules.
Configuration, logging and storage live in ``core``, request/response
models in ``schemas``, store access in ``services`` and the HTTP
routes in ``api/<version>/endpoints``.  The ASGI application itself is
``company_directory.app.main:app``; it is not imported here so that
clients can read ``core.config`` without building the application.
"""
