"""Database metadata: declarative Base shared by all ORM models."""
