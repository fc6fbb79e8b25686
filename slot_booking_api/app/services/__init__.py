"""
Service layer abstraction.

Each service encapsulates the business logic for one concern.  API
handlers stay thin and call into these classes; the services know
nothing about HTTP.
"""
