"""Transactional email for bookings and contact messages.

Emails are sent from Celery tasks that the message bus handlers enqueue
after the originating write commits. A failed send is logged and never
reaches the HTTP caller.
"""
