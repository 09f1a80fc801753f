"""Book catalog service.

HTTP API over a relational book catalog with filtering, pagination,
upstream synchronisation and minimal user registration.
"""

__version__ = "0.1.0"
