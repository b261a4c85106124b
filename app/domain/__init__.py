"""
Domain layer of the job board: jobs, applications, users, notifications
and skill matching.

Each area keeps its entities, repository interfaces with their SQLAlchemy
implementations, and the services the API layer calls.
"""
