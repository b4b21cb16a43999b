"""
repositories/ - Data Access Layer
==================================
SQL for the users table lives here. Repositories take the shared
connection at construction time and return domain model objects.
"""
