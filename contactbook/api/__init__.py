"""HTTP API for ContactBook.

- contacts: contact CRUD blueprint (bearer token required)
- validation: @validate_request decorator shared with the auth endpoints

The auth blueprint lives in contactbook.auth.api. Both blueprints are
registered under settings.api_prefix by main.create_app().
"""
