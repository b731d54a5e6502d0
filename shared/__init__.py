"""Plumbing used by every app.

Domain events and error families, the message bus and unit of work that
publish events after commit, the table gateway, and the API envelope with
its exception handler.
"""
