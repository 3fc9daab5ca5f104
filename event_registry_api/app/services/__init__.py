"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives
the ``Database`` handle explicitly, so API handlers stay thin and the
services can be exercised directly in tests and scripts.
"""
