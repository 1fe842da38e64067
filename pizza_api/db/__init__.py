"""Database Package — declarative base shared by every ORM model."""
