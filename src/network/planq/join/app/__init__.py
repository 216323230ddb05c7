"""
Join Application Layer

This package exposes the deep-link resolver over HTTP using the aiohttp
framework. Responses are JSON descriptions of resolution outcomes, HTML pages
and QR codes are produced by other services from these descriptions.

Key Components:
- cli.py: Entry point for running the application
- server.py: Web server configuration and middleware setup
- config.py: Configuration management using Pydantic settings
- handlers/: Request handlers

The application uses a Sentry middleware for error reporting.

It provides the following endpoint:
- Deep-link resolution for any path (/{path})
"""
