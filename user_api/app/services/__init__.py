"""
Service layer abstraction.

Services hold the application's data and business rules.  The user
store keeps everything in memory; replacing it with a database-backed
implementation would not require changes to the API handlers.
"""
