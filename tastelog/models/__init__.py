"""ORM models; importing this registers every table on the shared Base."""

from tastelog.models.visit import Visit  # noqa: F401
