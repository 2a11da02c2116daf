"""
Version 1 of the API.

Bundles the student endpoints.  Breaking changes to the wire format
should go into a new version subpackage.
"""
