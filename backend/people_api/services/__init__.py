# Services package init
"""
People API · Services Layer
=============================

What:  Data access between routes (HTTP) and the document store.
How:   Services receive the collection to act on, issue one query per
       operation, and return schemas or raise application exceptions.

Service Inventory:
    - PersonService: find, update, delete and insert people
"""
