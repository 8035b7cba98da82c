"""Reminder module (recurrence engine, range query, store, API).

The recurrence engine decides whether a reminder's rule produces an
occurrence inside a closed date/time window. Everything around it (store,
router, metrics) is thin glue for the "list reminders in range" query.
"""
